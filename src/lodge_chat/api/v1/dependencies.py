"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from lodge_chat.core.errors import Unauthorized
from lodge_chat.db.session import get_db
from lodge_chat.models import User
from lodge_chat.services import CabinService, LodgeService, TokenService, UserService

# The Authorization header carries the raw token string, with no scheme prefix.
token_header = APIKeyHeader(name="Authorization", auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_token_service(db: SessionDep) -> TokenService:
    return TokenService(db)


def get_user_service(db: SessionDep) -> UserService:
    return UserService(db)


def get_lodge_service(db: SessionDep) -> LodgeService:
    return LodgeService(db)


def get_cabin_service(db: SessionDep) -> CabinService:
    return CabinService(db)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
LodgeServiceDep = Annotated[LodgeService, Depends(get_lodge_service)]
CabinServiceDep = Annotated[CabinService, Depends(get_cabin_service)]


def get_current_user(
    authorization: Annotated[str | None, Depends(token_header)],
    tokens: TokenServiceDep,
) -> User:
    """Resolve the Authorization header to the user owning the token.

    Raises:
        Unauthorized: If the header is missing or matches no live token.
    """
    user = tokens.resolve(authorization)
    if user is None:
        raise Unauthorized("unauthorized: invalid token provided (Authorization header)")
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]
