"""Result type returned by the equipment access operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class EquipmentErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    STORAGE_FAILURE = "storage_failure"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class EquipmentResult(Generic[T]):
    """Outcome of one operation: a value on success, an error kind otherwise."""

    value: Optional[T] = None
    error: Optional[EquipmentErrorKind] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "EquipmentResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: EquipmentErrorKind, detail: str | None = None) -> "EquipmentResult[T]":
        return cls(error=kind, detail=detail)

    def unwrap_or(self, default: T) -> T:
        if self.ok:
            return self.value  # type: ignore[return-value]
        return default


__all__ = ["EquipmentErrorKind", "EquipmentResult"]
