"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .cabin import CabinCreate, CabinResponse, MessageCreate, PublicMessage
from .common import ERROR_RESPONSES, ErrorResponse
from .lodge import LodgeCreate, LodgeResponse
from .user import LoginRequest, PublicUser, TokenResponse, UserCreate, UserUpdate

__all__ = [
    "CabinCreate", "CabinResponse", "MessageCreate", "PublicMessage",
    "ERROR_RESPONSES", "ErrorResponse",
    "LodgeCreate", "LodgeResponse",
    "LoginRequest", "PublicUser", "TokenResponse", "UserCreate", "UserUpdate",
]
