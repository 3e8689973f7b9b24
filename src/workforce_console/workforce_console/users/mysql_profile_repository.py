from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository

_COLUMNS = "id, username, email, full_name, role, password_hash, job_title, whatsapp, is_active"


def _to_profile(r: Dict[str, Any]) -> Profile:
    return Profile(
        id=str(r["id"]),
        username=r["username"],
        email=r["email"],
        full_name=r["full_name"],
        role=Role(r["role"]),
        password_hash=r["password_hash"],
        job_title=r.get("job_title"),
        whatsapp=r.get("whatsapp"),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE id=%s", (profile_id,))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def get_by_username(self, username: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE username=%s", (username,))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def list_active(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE is_active=1 ORDER BY full_name ASC")
            return [_to_profile(r) for r in fetchall(cur)]
