from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, is_dataclass
from datetime import date, time
from enum import Enum
from typing import Any, Callable, Optional

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    ExternalServiceError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """What a mutating action hands back across the UI boundary."""

    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": to_jsonable(self.data)}
        return {"success": False, "error": self.error}


def to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    return value


def status_code_for(error: DomainError) -> int:
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 404
    if isinstance(error, ExternalServiceError):
        return 502
    if isinstance(error, PersistenceError):
        return 500
    return 400


def run_action(action: Callable[[], Any], *, failure_message: str) -> tuple[ActionResult, int]:
    """Run a service call and turn its outcome into (ActionResult, http status)."""
    try:
        return ActionResult.ok(action()), 200
    except DomainError as e:
        return ActionResult.fail(str(e)), status_code_for(e)
    except Exception:
        logger.exception(failure_message)
        return ActionResult.fail(failure_message), 500
