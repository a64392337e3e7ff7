"""SQLAlchemy models for lodges and their membership."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lodge_chat.db.session import Base
from lodge_chat.db.time import utcnow

LODGE_NAME_MAX = 32
LODGE_DESCRIPTION_MAX = 256


class Lodge(Base):
    """A community. Private lodges are only visible to their members."""

    __tablename__ = "lodges"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(LODGE_NAME_MAX), nullable=False)
    description: Mapped[str] = mapped_column(
        String(LODGE_DESCRIPTION_MAX), nullable=False, default=""
    )
    icon_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class LodgeMember(Base):
    """Join table mapping users into lodges with a lodge-scoped admin flag."""

    __tablename__ = "lodge_members"

    lodge_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("lodges.id"), primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), primary_key=True)
    join_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user: Mapped["User"] = relationship("User")  # noqa: F821
