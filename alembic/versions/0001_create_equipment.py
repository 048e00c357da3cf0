"""create equipment table"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_equipment"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "equipment",
        sa.Column("equipment_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("mine_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="OPERATIONAL"),
        sa.PrimaryKeyConstraint("equipment_id"),
    )
    op.create_index(op.f("ix_equipment_mine_id"), "equipment", ["mine_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_equipment_mine_id"), table_name="equipment")
    op.drop_table("equipment")
