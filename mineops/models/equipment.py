"""Equipment persistence."""

from __future__ import annotations

from sqlmodel import Field, SQLModel

OPERATIONAL = "OPERATIONAL"
BROKEN = "BROKEN"
MAINTENANCE = "MAINTENANCE"


class Equipment(SQLModel, table=True):
    """A piece of equipment owned by one mine."""

    __tablename__ = "equipment"

    equipment_id: int = Field(
        primary_key=True,
        sa_column_kwargs={"autoincrement": False},
        description="Caller-assigned identifier; immutable once registered",
    )
    mine_id: int = Field(index=True, description="Currently owning mine")
    status: str = Field(default=OPERATIONAL, max_length=32)


__all__ = ["Equipment", "OPERATIONAL", "BROKEN", "MAINTENANCE"]
