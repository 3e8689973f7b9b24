from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Mapping

from .model import IdentityRecord


class MergeStrategy(ABC):
    """How resolved fields land on the current form state."""

    @abstractmethod
    def merge(self, current: IdentityRecord, resolved: Mapping[str, str]) -> IdentityRecord:
        raise NotImplementedError


class PartialMerge(MergeStrategy):
    """Image path: only fields with a value overwrite; nothing is ever blanked."""

    def merge(self, current: IdentityRecord, resolved: Mapping[str, str]) -> IdentityRecord:
        updates = {
            name: value
            for name, value in resolved.items()
            if name in IdentityRecord.field_names() and value and value.strip()
        }
        return replace(current, **updates)


class FullReplaceWithDefaults(MergeStrategy):
    """JSON paste path: every field becomes the resolved value or its default."""

    def merge(self, current: IdentityRecord, resolved: Mapping[str, str]) -> IdentityRecord:
        values = IdentityRecord.defaults()
        values.update({name: value for name, value in resolved.items() if name in values and value})
        return IdentityRecord(**values)
