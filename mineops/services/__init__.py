"""Service-layer utilities."""

from .equipment import EquipmentService
from .results import EquipmentErrorKind, EquipmentResult

__all__ = [
    "EquipmentService",
    "EquipmentErrorKind",
    "EquipmentResult",
]
