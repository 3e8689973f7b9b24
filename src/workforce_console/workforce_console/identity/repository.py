from __future__ import annotations

from typing import Protocol

from .model import IdentityRecord


class SlikRepository(Protocol):
    def create(self, *, record: IdentityRecord, created_by: str) -> str:
        """Persist a finalized KTP record and return its slik_id."""

        raise NotImplementedError
