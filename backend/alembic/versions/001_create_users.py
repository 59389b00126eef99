"""Create users table.

Revision ID: 001_create_users
Revises: None
Create Date: 2026-10-17

UNIQUE on email and mobileno backs the application-level existence check:
two concurrent signups with the same email or mobile cannot both insert.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("userid", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("mobileno", sa.String(10), nullable=False),
        sa.Column("password", sa.String(64), nullable=False),
        sa.Column("profilepic", sa.Text, nullable=True),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("mobileno", name="uq_users_mobileno"),
    )


def downgrade() -> None:
    op.drop_table("users")
