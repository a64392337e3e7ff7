"""SQLAlchemy models for user identities and their bearer tokens."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lodge_chat.db.session import Base
from lodge_chat.db.time import utcnow

DISPLAY_NAME_MAX = 32
PRONOUNS_MAX = 16
DESCRIPTION_MAX = 256
TOKEN_MAX = 128


class User(Base):
    """A registered account.

    ``password`` holds the Argon2 hash, never the plaintext. ``admin`` is the
    site-wide flag and is unrelated to lodge-scoped admin rights.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    display_name: Mapped[str] = mapped_column(String(DISPLAY_NAME_MAX), nullable=False)
    pronouns: Mapped[str] = mapped_column(String(PRONOUNS_MAX), nullable=False, default="")
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX), nullable=False, default="")
    password: Mapped[str | None] = mapped_column(String(256), nullable=True)
    join_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class Token(Base):
    """The single live bearer token of a user.

    Keyed by user so that a second row for the same user cannot exist; the
    token string carries its own unique index for lookups.
    """

    __tablename__ = "tokens"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        primary_key=True,
    )
    token: Mapped[str] = mapped_column(String(TOKEN_MAX), nullable=False, unique=True, index=True)

    user: Mapped[User] = relationship("User")
