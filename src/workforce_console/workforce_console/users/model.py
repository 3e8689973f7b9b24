from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: a console user (marketing, ops or admin)."""

    id: str
    username: str
    email: str
    full_name: str
    role: Role
    password_hash: str
    job_title: Optional[str] = None
    whatsapp: Optional[str] = None
    is_active: bool = True
