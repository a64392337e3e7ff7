"""Business logic services for the Lodge Chat application."""

from .cabin_service import CabinService
from .lodge_service import LodgeService
from .token_service import TokenService
from .user_service import UserService

__all__ = [
    "CabinService",
    "LodgeService",
    "TokenService",
    "UserService",
]
