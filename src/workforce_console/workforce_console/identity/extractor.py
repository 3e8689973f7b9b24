from __future__ import annotations

import base64
import json
import logging
from typing import Any, Dict, Optional, Protocol

from openai import OpenAI, OpenAIError

from ..core.constants import DEFAULT_VISION_MODEL
from ..core.exceptions import ExternalServiceError
from .normalizer import KTP_SCHEMA_KEYS

logger = logging.getLogger(__name__)

KTP_PROMPT = (
    "Ekstrak data dari KTP Indonesia ini secara detail. "
    "Pisahkan Tempat Lahir dan Tanggal Lahir (Format YYYY-MM-DD). "
    "Sertakan Golongan Darah jika tertera (A/B/AB/O). "
    "Kembalikan JSON dengan format yang diminta."
)

KTP_JSON_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {key: {"type": "string"} for key in KTP_SCHEMA_KEYS},
    "required": list(KTP_SCHEMA_KEYS),
    "additionalProperties": False,
}


class IdentityExtractor(Protocol):
    """Image bytes in, raw KTP key/value pairs out (any subset of the schema)."""

    def extract(self, image_bytes: bytes, *, mime_type: str = "image/jpeg") -> Dict[str, Any]:
        raise NotImplementedError


class OpenAIIdentityExtractor:
    def __init__(self, *, api_key: Optional[str] = None, model: str = DEFAULT_VISION_MODEL, client: Optional[OpenAI] = None):
        self._client = client
        self._api_key = api_key
        self._model = model

    def _get_client(self) -> OpenAI:
        # Built lazily so the app starts without a key configured.
        if self._client is None:
            if not self._api_key:
                raise ExternalServiceError("Vision extraction is not configured (OPENAI_API_KEY)")
            self._client = OpenAI(api_key=self._api_key)
        return self._client

    def extract(self, image_bytes: bytes, *, mime_type: str = "image/jpeg") -> Dict[str, Any]:
        data_url = f"data:{mime_type};base64,{base64.b64encode(image_bytes).decode('ascii')}"
        try:
            r = self._get_client().responses.create(
                model=self._model,
                input=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "input_text", "text": KTP_PROMPT},
                            {"type": "input_image", "image_url": data_url},
                        ],
                    }
                ],
                text={
                    "format": {
                        "type": "json_schema",
                        "name": "ktp",
                        "schema": KTP_JSON_SCHEMA,
                        "strict": True,
                    }
                },
            )
        except OpenAIError as e:
            logger.error("KTP extraction call failed: %s", e)
            raise ExternalServiceError(f"KTP extraction failed: {e}") from e

        try:
            result = json.loads(r.output_text or "{}")
        except ValueError as e:
            logger.error("KTP extraction returned unparsable output")
            raise ExternalServiceError("KTP extraction returned an unreadable response") from e
        if not isinstance(result, dict):
            raise ExternalServiceError("KTP extraction returned an unreadable response")
        return result
