"""User-related Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import Field, field_serializer

from lodge_chat.db.time import epoch_seconds

from .common import CamelModel


class UserCreate(CamelModel):
    """Registration payload. Presence is checked by the service layer."""

    display_name: str | None = None
    password: str | None = None


class UserUpdate(CamelModel):
    """Profile update payload; omitted fields keep their current value."""

    display_name: str | None = None
    pronouns: str | None = None
    description: str | None = None


class LoginRequest(CamelModel):
    """Credentials exchanged for a bearer token."""

    id: uuid.UUID | None = None
    password: str | None = None


class TokenResponse(CamelModel):
    """A user's bearer token."""

    id: str = Field(..., description="User id")
    token: str = Field(..., description="Opaque bearer string for the Authorization header")


class PublicUser(CamelModel):
    """Public projection of a user; never includes the password hash."""

    id: uuid.UUID
    display_name: str
    pronouns: str
    description: str
    join_date: datetime
    admin: bool

    @field_serializer("join_date")
    def serialize_join_date(self, value: datetime) -> int:
        """Render the join date as epoch seconds."""
        return epoch_seconds(value)
