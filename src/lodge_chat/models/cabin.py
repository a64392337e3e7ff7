"""SQLAlchemy models for cabins and the messages posted in them."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lodge_chat.db.session import Base
from lodge_chat.db.time import utcnow

CABIN_NAME_MAX = 16
CABIN_TOPIC_MAX = 128
MESSAGE_CONTENT_MAX = 2048


class Cabin(Base):
    """A channel inside exactly one lodge."""

    __tablename__ = "cabins"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(CABIN_NAME_MAX), nullable=False)
    topic: Mapped[str] = mapped_column(String(CABIN_TOPIC_MAX), nullable=False, default="")
    lodge_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("lodges.id"), nullable=False)
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    # Only lodge admins may read or post in the cabin when set.
    require_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    lodge: Mapped["Lodge"] = relationship("Lodge")  # noqa: F821


class LodgeCabin(Base):
    """Join table recording which cabins a lodge owns."""

    __tablename__ = "lodge_cabins"

    lodge_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("lodges.id"), primary_key=True)
    cabin_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cabins.id"), primary_key=True)


class Message(Base):
    """An immutable post in a cabin."""

    __tablename__ = "messages"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), nullable=False)
    content: Mapped[str] = mapped_column(String(MESSAGE_CONTENT_MAX), nullable=False)
    lodge_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("lodges.id"), nullable=False)
    cabin_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("cabins.id"), nullable=False)
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )

    user: Mapped["User"] = relationship("User")  # noqa: F821


class CabinMessage(Base):
    """Join table recording which messages a cabin owns.

    ``position`` increases with every insert and breaks timestamp ties.
    """

    __tablename__ = "cabin_messages"

    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cabin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("cabins.id"), nullable=False, index=True
    )
    message_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("messages.id"), nullable=False, unique=True
    )
