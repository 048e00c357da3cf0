"""Database models."""

from .equipment import BROKEN, MAINTENANCE, OPERATIONAL, Equipment

__all__ = [
    "Equipment",
    "OPERATIONAL",
    "BROKEN",
    "MAINTENANCE",
]
