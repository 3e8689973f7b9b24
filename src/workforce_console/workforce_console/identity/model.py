from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

from ..core.constants import DEFAULT_NATIONALITY, DEFAULT_VALID_UNTIL


@dataclass(frozen=True)
class IdentityRecord:
    """KTP capture form state.

    Immutable: every edit produces a new record, so a failed extraction or a
    bad paste can never leave the form half-updated.
    """

    id_number: str = ""
    full_name: str = ""
    birth_place: str = ""
    birth_date: str = ""
    gender: str = ""
    blood_type: str = ""
    address: str = ""
    rt_rw: str = ""
    sub_district: str = ""
    district: str = ""
    religion: str = ""
    marital_status: str = ""
    occupation: str = ""
    nationality: str = DEFAULT_NATIONALITY
    valid_until: str = DEFAULT_VALID_UNTIL

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def defaults(cls) -> Dict[str, str]:
        return {f.name: f.default for f in fields(cls)}

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.field_names()}

    @property
    def is_complete(self) -> bool:
        """Save is only allowed once NIK and name are filled."""
        return bool(self.id_number.strip()) and bool(self.full_name.strip())


# Choices offered by the capture form.
GENDER_OPTIONS = ("LAKI-LAKI", "PEREMPUAN")
BLOOD_TYPE_OPTIONS = ("A", "B", "AB", "O", "-")
RELIGION_OPTIONS = ("ISLAM", "KRISTEN", "KATHOLIK", "HINDU", "BUDHA", "KHONGHUCU")
MARITAL_STATUS_OPTIONS = ("BELUM KAWIN", "KAWIN", "CERAI HIDUP", "CERAI MATI")
NATIONALITY_OPTIONS = ("WNI", "WNA")
