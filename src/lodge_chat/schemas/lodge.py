"""Lodge-related Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import field_serializer

from lodge_chat.db.time import epoch_seconds

from .common import CamelModel


class LodgeCreate(CamelModel):
    """Schema for creating a new lodge."""

    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    public: bool = True


class LodgeResponse(CamelModel):
    """Schema for lodge information returned by the API."""

    id: uuid.UUID
    name: str
    description: str
    icon_url: str
    creation_date: datetime
    public: bool

    @field_serializer("creation_date")
    def serialize_creation_date(self, value: datetime) -> int:
        """Render the creation date as epoch seconds."""
        return epoch_seconds(value)
