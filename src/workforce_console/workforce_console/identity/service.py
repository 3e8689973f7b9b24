from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_person
from ..core.exceptions import ExternalServiceError, PersistenceError, ValidationError
from .extractor import IdentityExtractor
from .merge import FullReplaceWithDefaults, MergeStrategy, PartialMerge
from .model import IdentityRecord
from .normalizer import parse_json_object, resolve_fields
from .repository import SlikRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinalizedIdentity:
    slik_id: str
    full_name: str
    form: IdentityRecord


class IdentityCaptureService:
    """KTP capture for SLIK checks: photo extraction, JSON paste, save.

    Every method takes the current form record and returns a new one; on
    error it raises and the caller keeps the record it already has.
    """

    def __init__(
        self,
        extractor: IdentityExtractor,
        sliks: SlikRepository,
        *,
        image_merge: MergeStrategy | None = None,
        json_merge: MergeStrategy | None = None,
    ):
        self._extractor = extractor
        self._sliks = sliks
        self._image_merge = image_merge or PartialMerge()
        self._json_merge = json_merge or FullReplaceWithDefaults()

    @staticmethod
    def blank() -> IdentityRecord:
        return IdentityRecord()

    def extract_from_image(self, current: IdentityRecord, image_bytes: bytes, *, mime_type: str = "image/jpeg") -> IdentityRecord:
        if not image_bytes:
            raise ValidationError("No KTP photo to extract from")
        try:
            payload = self._extractor.extract(image_bytes, mime_type=mime_type)
        except ExternalServiceError:
            raise
        except Exception as e:
            logger.exception("Extraction error")
            raise ExternalServiceError(f"KTP extraction failed: {e}") from e

        if not isinstance(payload, dict):
            raise ExternalServiceError("KTP extraction returned an unreadable response")
        return self._image_merge.merge(current, resolve_fields(payload))

    def normalize_from_json(self, current: IdentityRecord, raw_text: str) -> IdentityRecord:
        parsed = parse_json_object(raw_text)
        return self._json_merge.merge(current, resolve_fields(parsed))

    def finalize(self, record: IdentityRecord, *, created_by: Optional[str]) -> FinalizedIdentity:
        if not record.id_number.strip():
            raise ValidationError("NIK is required")
        if not record.full_name.strip():
            raise ValidationError("Full name is required")
        created_by = require_person(created_by)

        try:
            slik_id = self._sliks.create(record=record, created_by=created_by)
        except PersistenceError as e:
            logger.error("SLIK save error: %s", e)
            raise PersistenceError(f"Failed to save KTP data: {e}") from e

        logger.info("KTP verification saved (%s) by %s", slik_id, created_by)
        return FinalizedIdentity(slik_id=slik_id, full_name=record.full_name.strip(), form=self.blank())
