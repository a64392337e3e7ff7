"""SQLAlchemy models for the Lodge Chat application."""

from .cabin import Cabin, CabinMessage, LodgeCabin, Message
from .lodge import Lodge, LodgeMember
from .user import Token, User

__all__ = [
    "Cabin", "CabinMessage", "LodgeCabin", "Message",
    "Lodge", "LodgeMember",
    "Token", "User",
]
