"""Initial schema: provinces and members

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "provinces",
        sa.Column("code", sa.String(length=2), nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("country_code", sa.String(length=2), nullable=False),
        sa.PrimaryKeyConstraint("code"),
    )

    op.create_table(
        "members",
        sa.Column("member_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("full_name", sa.String(length=256), nullable=True),
        sa.Column("first_name", sa.String(length=64), nullable=False),
        sa.Column("last_name", sa.String(length=64), nullable=False),
        sa.Column("spouse_first_name", sa.String(length=64), nullable=True),
        sa.Column("spouse_last_name", sa.String(length=64), nullable=True),
        sa.Column("street", sa.String(length=128), nullable=True),
        sa.Column("city", sa.String(length=64), nullable=True),
        sa.Column("province_code", sa.String(length=2), nullable=True),
        sa.Column("postal_code", sa.String(length=10), nullable=True),
        sa.Column("home_phone", sa.String(length=16), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("year_joined", sa.Integer(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("task_exempt", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("use_canada_post", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["province_code"], ["provinces.code"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("member_id"),
    )
    op.create_index("ix_members_full_name", "members", ["full_name"])


def downgrade() -> None:
    op.drop_index("ix_members_full_name", table_name="members")
    op.drop_table("members")
    op.drop_table("provinces")
