"""Create hellos and byes tables.

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

MOODS = ("HAPPY", "EXCITED", "SLEEPY", "HUNGRY")


def upgrade() -> None:
    # Both tables share one PostgreSQL enum type, created once up front
    postgresql.ENUM(*MOODS, name="mood_type").create(op.get_bind(), checkfirst=True)
    mood_type = sa.Enum(*MOODS, name="mood_type").with_variant(
        postgresql.ENUM(*MOODS, name="mood_type", create_type=False), "postgresql"
    )
    op.create_table(
        "hellos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("mood", mood_type, nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_hellos_mood"), "hellos", ["mood"], unique=False)
    op.create_index(op.f("ix_hellos_timestamp"), "hellos", ["timestamp"], unique=False)
    op.create_table(
        "byes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hello_id", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("mood", mood_type, nullable=False),
        sa.Column("wave_count", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["hello_id"], ["hellos.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_byes_hello_id"), "byes", ["hello_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_byes_hello_id"), table_name="byes")
    op.drop_table("byes")
    op.drop_index(op.f("ix_hellos_timestamp"), table_name="hellos")
    op.drop_index(op.f("ix_hellos_mood"), table_name="hellos")
    op.drop_table("hellos")
    postgresql.ENUM(name="mood_type").drop(op.get_bind(), checkfirst=True)
