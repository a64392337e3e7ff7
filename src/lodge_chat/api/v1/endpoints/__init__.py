"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .lodges import router as lodges_router
from .messages import router as messages_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "lodges_router",
    "messages_router",
    "users_router",
]
