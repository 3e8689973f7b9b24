from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import ProfileRepository

INVALID_LOGIN = "Invalid username or password."


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    full_name: str
    role: Role
    job_title: Optional[str]

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin


class AuthService:
    """Use case: authenticate a profile (login)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username and password are required.")

        profile = self._profiles.get_by_username(username)
        if not profile or not profile.is_active:
            raise AuthenticationError(INVALID_LOGIN)

        try:
            ok = check_password_hash(profile.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like '!disabled' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_LOGIN)

        return SessionUser(
            user_id=profile.id,
            full_name=profile.full_name,
            role=profile.role,
            job_title=profile.job_title,
        )

    def get_session_user(self, profile_id: Optional[str]) -> Optional[SessionUser]:
        if not profile_id:
            return None
        profile = self._profiles.get_by_id(profile_id)
        if not profile or not profile.is_active:
            return None
        return SessionUser(user_id=profile.id, full_name=profile.full_name, role=profile.role, job_title=profile.job_title)
