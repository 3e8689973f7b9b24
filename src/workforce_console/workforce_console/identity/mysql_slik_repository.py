from __future__ import annotations

import re
import uuid
from typing import Optional, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import IdentityRecord
from .repository import SlikRepository


_DIGIT_GROUPS = re.compile(r"\d+")
# rt/rw columns are VARCHAR(5).
_RT_RW_WIDTH = 5


def split_rt_rw(value: str) -> Tuple[Optional[str], Optional[str]]:
    """'001/002' -> ('001', '002'); 'RT 001/RW 002' -> ('001', '002').

    Only the first two digit groups are kept; a lone group is treated as RT.
    """
    groups = [g[:_RT_RW_WIDTH] for g in _DIGIT_GROUPS.findall(value or "")]
    if not groups:
        return None, None
    return groups[0], (groups[1] if len(groups) > 1 else None)


def _blank_to_none(value: str) -> Optional[str]:
    value = (value or "").strip()
    return value or None


class MySQLSlikRepository(SlikRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, record: IdentityRecord, created_by: str) -> str:
        slik_id = str(uuid.uuid4())
        rt, rw = split_rt_rw(record.rt_rw)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO sliks(
                    slik_id, nik, full_name, birth_place, birth_date, gender, blood_type,
                    address, rt, rw, village, district, religion, marital_status,
                    occupation, nationality, expiry_date, created_by
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    slik_id,
                    record.id_number.strip(),
                    record.full_name.strip(),
                    _blank_to_none(record.birth_place),
                    _blank_to_none(record.birth_date),
                    _blank_to_none(record.gender),
                    _blank_to_none(record.blood_type),
                    _blank_to_none(record.address),
                    rt,
                    rw,
                    _blank_to_none(record.sub_district),
                    _blank_to_none(record.district),
                    _blank_to_none(record.religion),
                    _blank_to_none(record.marital_status),
                    _blank_to_none(record.occupation),
                    _blank_to_none(record.nationality),
                    _blank_to_none(record.valid_until),
                    created_by,
                ),
            )
        return slik_id
