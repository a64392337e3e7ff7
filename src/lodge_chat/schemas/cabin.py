"""Cabin and message Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import field_serializer

from lodge_chat.db.time import epoch_seconds
from lodge_chat.models import Message

from .common import CamelModel
from .user import PublicUser


class CabinCreate(CamelModel):
    """Schema for creating a cabin inside a lodge."""

    name: str | None = None
    topic: str | None = None
    require_admin: bool = False


class CabinResponse(CamelModel):
    """Schema for cabin information returned by the API."""

    id: uuid.UUID
    name: str
    topic: str
    lodge_id: uuid.UUID
    creation_date: datetime
    require_admin: bool

    @field_serializer("creation_date")
    def serialize_creation_date(self, value: datetime) -> int:
        """Render the creation date as epoch seconds."""
        return epoch_seconds(value)


class MessageCreate(CamelModel):
    """Schema for posting a message."""

    content: str | None = None


class PublicMessage(CamelModel):
    """A message together with the public projection of its author."""

    id: uuid.UUID
    user: PublicUser
    content: str
    lodge_id: uuid.UUID
    cabin_id: uuid.UUID
    creation_date: datetime

    @field_serializer("creation_date")
    def serialize_creation_date(self, value: datetime) -> int:
        """Render the creation date as epoch seconds."""
        return epoch_seconds(value)

    @classmethod
    def from_message(cls, message: Message) -> "PublicMessage":
        """Build the public form of a stored message."""
        return cls(
            id=message.id,
            user=PublicUser.model_validate(message.user),
            content=message.content,
            lodge_id=message.lodge_id,
            cabin_id=message.cabin_id,
            creation_date=message.creation_date,
        )
