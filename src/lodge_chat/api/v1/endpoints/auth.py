"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from lodge_chat.schemas.common import ERROR_RESPONSES
from lodge_chat.schemas.user import LoginRequest, TokenResponse

from ..dependencies import UserServiceDep

router = APIRouter(tags=["authentication"], responses=ERROR_RESPONSES)


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
async def login(payload: LoginRequest, users: UserServiceDep) -> TokenResponse:
    """Exchange a user id and password for the user's bearer token."""
    token = users.authenticate(payload.id, payload.password)
    return TokenResponse(id=str(token.user_id), token=token.token)
