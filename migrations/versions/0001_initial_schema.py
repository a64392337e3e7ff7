"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, tokens, lodges, cabins, messages and their join tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("display_name", sa.String(length=32), nullable=False),
        sa.Column("pronouns", sa.String(length=16), nullable=False),
        sa.Column("description", sa.String(length=256), nullable=False),
        sa.Column("password", sa.String(length=256), nullable=True),
        sa.Column("join_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("admin", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "tokens",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token", sa.String(length=128), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index(op.f("ix_tokens_token"), "tokens", ["token"], unique=True)
    op.create_table(
        "lodges",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=32), nullable=False),
        sa.Column("description", sa.String(length=256), nullable=False),
        sa.Column("icon_url", sa.Text(), nullable=False),
        sa.Column("creation_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("public", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "lodge_members",
        sa.Column("lodge_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("join_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("admin", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["lodge_id"], ["lodges.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("lodge_id", "user_id"),
    )
    op.create_table(
        "cabins",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=16), nullable=False),
        sa.Column("topic", sa.String(length=128), nullable=False),
        sa.Column("lodge_id", sa.Uuid(), nullable=False),
        sa.Column("creation_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("require_admin", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["lodge_id"], ["lodges.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "lodge_cabins",
        sa.Column("lodge_id", sa.Uuid(), nullable=False),
        sa.Column("cabin_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["cabin_id"], ["cabins.id"]),
        sa.ForeignKeyConstraint(["lodge_id"], ["lodges.id"]),
        sa.PrimaryKeyConstraint("lodge_id", "cabin_id"),
    )
    op.create_table(
        "messages",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("content", sa.String(length=2048), nullable=False),
        sa.Column("lodge_id", sa.Uuid(), nullable=False),
        sa.Column("cabin_id", sa.Uuid(), nullable=False),
        sa.Column("creation_date", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["cabin_id"], ["cabins.id"]),
        sa.ForeignKeyConstraint(["lodge_id"], ["lodges.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_messages_creation_date"), "messages", ["creation_date"])
    op.create_table(
        "cabin_messages",
        sa.Column("position", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cabin_id", sa.Uuid(), nullable=False),
        sa.Column("message_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["cabin_id"], ["cabins.id"]),
        sa.ForeignKeyConstraint(["message_id"], ["messages.id"]),
        sa.PrimaryKeyConstraint("position"),
        sa.UniqueConstraint("message_id"),
    )
    op.create_index(op.f("ix_cabin_messages_cabin_id"), "cabin_messages", ["cabin_id"])


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index(op.f("ix_cabin_messages_cabin_id"), table_name="cabin_messages")
    op.drop_table("cabin_messages")
    op.drop_index(op.f("ix_messages_creation_date"), table_name="messages")
    op.drop_table("messages")
    op.drop_table("lodge_cabins")
    op.drop_table("cabins")
    op.drop_table("lodge_members")
    op.drop_table("lodges")
    op.drop_index(op.f("ix_tokens_token"), table_name="tokens")
    op.drop_table("tokens")
    op.drop_table("users")
