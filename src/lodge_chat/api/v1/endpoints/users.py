"""User account endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, status

from lodge_chat.core.errors import Forbidden
from lodge_chat.models import User
from lodge_chat.schemas.common import ERROR_RESPONSES
from lodge_chat.schemas.user import PublicUser, TokenResponse, UserCreate, UserUpdate

from ..dependencies import CurrentUserDep, TokenServiceDep, UserServiceDep

router = APIRouter(tags=["users"], responses=ERROR_RESPONSES)


@router.get("/users", response_model=list[PublicUser])
async def list_users(users: UserServiceDep) -> Sequence[User]:
    """List every user's public projection."""
    return users.list_users()


@router.get("/admins", response_model=list[PublicUser])
async def list_admins(users: UserServiceDep) -> Sequence[User]:
    """List users holding the site-wide admin flag."""
    return users.list_admins()


@router.post("/user", response_model=PublicUser, status_code=status.HTTP_201_CREATED)
async def register_user(payload: UserCreate, users: UserServiceDep) -> User:
    """Register a new user."""
    return users.register(payload.display_name, payload.password)


@router.put("/user", response_model=PublicUser)
async def update_user(
    payload: UserUpdate,
    current_user: CurrentUserDep,
    users: UserServiceDep,
) -> User:
    """Update the caller's profile; omitted fields are left unchanged."""
    return users.update_profile(
        current_user,
        display_name=payload.display_name,
        pronouns=payload.pronouns,
        description=payload.description,
    )


@router.get("/user", response_model=PublicUser)
async def get_me(current_user: CurrentUserDep) -> User:
    """Return the caller's public projection."""
    return current_user


@router.get("/user/{user_id}", response_model=PublicUser)
async def get_user(user_id: str, current_user: CurrentUserDep) -> User:
    """Return a user by id; callers may only fetch themselves.

    The raw path segment is compared, so a malformed id is a mismatch (403).
    """
    if str(current_user.id).lower() != user_id.lower():
        raise Forbidden("forbidden: attempted to access non-self user")
    return current_user


@router.post("/user/reset", response_model=TokenResponse)
async def reset_token(current_user: CurrentUserDep, tokens: TokenServiceDep) -> TokenResponse:
    """Replace the caller's token with a fresh one."""
    token = tokens.reset(current_user)
    return TokenResponse(id=str(current_user.id), token=token.token)
