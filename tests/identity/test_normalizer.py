import pytest

from src.workforce_console.workforce_console.core.exceptions import InvalidFormatError
from src.workforce_console.workforce_console.identity.normalizer import (
    KTP_SCHEMA_KEYS,
    parse_json_object,
    resolve_fields,
)


def test_resolve_fields_mixed_aliases():
    resolved = resolve_fields({"NIK": "1234", "nama_lengkap": "Jane"})

    assert resolved == {"id_number": "1234", "full_name": "Jane"}


def test_first_non_empty_alias_wins():
    resolved = resolve_fields({"nama": "", "nama_lengkap": "  Budi  ", "NAMA": "Other"})

    assert resolved["full_name"] == "Budi"


def test_english_field_name_is_last_resort():
    assert resolve_fields({"occupation": "KARYAWAN"}) == {"occupation": "KARYAWAN"}
    assert resolve_fields({"pekerjaan": "PNS", "occupation": "KARYAWAN"}) == {"occupation": "PNS"}


def test_numbers_become_text_and_containers_are_ignored():
    resolved = resolve_fields({"nik": 3201010101010001, "alamat": {"jalan": "x"}, "agama": ["ISLAM"], "GOL_DARAH": True})

    assert resolved == {"id_number": "3201010101010001"}


def test_unknown_keys_are_ignored():
    assert resolve_fields({"foo": "bar"}) == {}


def test_schema_keys_cover_every_field():
    assert len(KTP_SCHEMA_KEYS) == 15
    assert KTP_SCHEMA_KEYS[0] == "nik"


@pytest.mark.parametrize("raw", ["", "{nik: 1}", "not json", "[1, 2]", '"text"', "null"])
def test_parse_json_object_rejects(raw):
    with pytest.raises(InvalidFormatError, match="invalid JSON"):
        parse_json_object(raw)


def test_parse_json_object_accepts_object():
    assert parse_json_object('{"nik": "1"}') == {"nik": "1"}
