"""Map heterogeneous KTP payload keys onto IdentityRecord fields."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Tuple

from ..core.exceptions import InvalidFormatError
from .model import IdentityRecord

INVALID_JSON_MESSAGE = "invalid JSON, check formatting"

# Ordered: the first alias holding a non-empty value wins.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id_number": ("nik", "NIK"),
    "full_name": ("nama", "nama_lengkap", "NAMA"),
    "birth_place": ("tempat_lahir", "TEMPAT_LAHIR"),
    "birth_date": ("tanggal_lahir", "TANGGAL_LAHIR"),
    "gender": ("jenis_kelamin", "JENIS_KELAMIN"),
    "blood_type": ("golongan_darah", "GOL_DARAH"),
    "address": ("alamat", "ALAMAT"),
    "rt_rw": ("rt_rw", "RT_RW"),
    "sub_district": ("kel_desa", "KEL_DESA"),
    "district": ("kecamatan", "KECAMATAN"),
    "religion": ("agama", "AGAMA"),
    "marital_status": ("status_perkawinan", "STATUS_PERKAWINAN"),
    "occupation": ("pekerjaan", "PEKERJAAN"),
    "nationality": ("kewarganegaraan", "KEWARGANEGARAAN"),
    "valid_until": ("berlaku_hingga", "BERLAKU_HINGGA"),
}

# Keys of the vision extraction schema (first alias of each field).
KTP_SCHEMA_KEYS: Tuple[str, ...] = tuple(aliases[0] for aliases in FIELD_ALIASES.values())


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return ""
    return str(value).strip()


def resolve_fields(payload: Mapping[str, Any]) -> Dict[str, str]:
    """Return only the fields that some alias actually resolved to a value."""
    resolved: Dict[str, str] = {}
    for field_name in IdentityRecord.field_names():
        for key in FIELD_ALIASES[field_name] + (field_name,):
            text = _as_text(payload.get(key))
            if text:
                resolved[field_name] = text
                break
    return resolved


def parse_json_object(raw_text: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(raw_text or "")
    except (TypeError, ValueError):
        raise InvalidFormatError(INVALID_JSON_MESSAGE)
    if not isinstance(parsed, dict):
        raise InvalidFormatError(INVALID_JSON_MESSAGE)
    return parsed
