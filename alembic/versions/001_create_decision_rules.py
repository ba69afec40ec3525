"""Create decision_rules table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "decision_rules",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("conditions", postgresql.JSONB(), nullable=False),
        sa.Column("action", sa.Text(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_decision_rules_active", "decision_rules", ["active"])
    op.create_index("ix_decision_rules_priority", "decision_rules", ["priority"])
    op.create_index(
        "ix_decision_rules_conditions",
        "decision_rules",
        ["conditions"],
        postgresql_using="gin",
    )


def downgrade() -> None:
    op.drop_index("ix_decision_rules_conditions", table_name="decision_rules")
    op.drop_index("ix_decision_rules_priority", table_name="decision_rules")
    op.drop_index("ix_decision_rules_active", table_name="decision_rules")
    op.drop_table("decision_rules")
