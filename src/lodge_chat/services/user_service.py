"""Registration, login, and profile management for users."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy.orm import Session

from lodge_chat.core import security
from lodge_chat.core.errors import NotFound, Unauthorized, ValidationFailed
from lodge_chat.models import Token, User
from lodge_chat.models.user import DESCRIPTION_MAX, DISPLAY_NAME_MAX, PRONOUNS_MAX
from lodge_chat.services.token_service import TokenService

logger = logging.getLogger(__name__)

__all__ = ["UserService"]


def _check_display_name(display_name: str | None) -> str:
    if not display_name:
        raise ValidationFailed("bad request: displayName not present")
    if len(display_name) > DISPLAY_NAME_MAX:
        raise ValidationFailed(
            f"bad request: displayName too long (max {DISPLAY_NAME_MAX} characters)"
        )
    return display_name


class UserService:
    """CRUD-style helpers for managing users and their credentials."""

    def __init__(self, db: Session, tokens: TokenService | None = None) -> None:
        self.db = db
        self.tokens = tokens or TokenService(db)

    def get_user(self, user_id: uuid.UUID) -> User | None:
        """Return a single user by primary key."""
        return self.db.get(User, user_id)

    def list_users(self) -> Sequence[User]:
        """Return every registered user."""
        return self.db.query(User).order_by(User.join_date).all()

    def list_admins(self) -> Sequence[User]:
        """Return users carrying the site-wide admin flag."""
        return self.db.query(User).filter(User.admin.is_(True)).order_by(User.join_date).all()

    def register(self, display_name: str | None, password: str | None) -> User:
        """Create a user after validating the name and password strength.

        The display name is fed to the strength estimator as a dictionary word,
        so passwords built from it are rejected as weak.

        Raises:
            ValidationFailed: If a field is missing, too long, or the password is weak.
        """
        display_name = _check_display_name(display_name)
        if not password:
            raise ValidationFailed("bad request: password not present")
        if not security.is_strong_password(password, [display_name]):
            raise ValidationFailed("bad request: password too weak")

        user = User(
            id=uuid.uuid4(),
            display_name=display_name,
            pronouns="",
            description="",
            password=security.hash_password(password),
            admin=False,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, user_id: uuid.UUID | None, password: str | None) -> Token:
        """Exchange an id and password for the user's bearer token.

        Raises:
            ValidationFailed: If the id or password is missing.
            NotFound: If no user has the given id.
            Unauthorized: If the password does not match.
        """
        if user_id is None:
            raise ValidationFailed("bad request: no id present")
        if not password:
            raise ValidationFailed("bad request: no password present")

        user = self.get_user(user_id)
        if user is None:
            raise NotFound("bad request: invalid user id")
        if not security.verify_password(password, user.password):
            logger.warning("Rejected login for user %s: incorrect password", user.id)
            raise Unauthorized("unauthorized: incorrect password")
        return self.tokens.issue(user)

    def update_profile(
        self,
        user: User,
        *,
        display_name: str | None = None,
        pronouns: str | None = None,
        description: str | None = None,
    ) -> User:
        """Apply the supplied profile fields; omitted fields keep their value.

        The password hash, join date, and admin flag are never touched.
        """
        if display_name is not None:
            _check_display_name(display_name)
        if pronouns is not None and len(pronouns) > PRONOUNS_MAX:
            raise ValidationFailed(
                f"bad request: pronouns too long (max {PRONOUNS_MAX} characters)"
            )
        if description is not None and len(description) > DESCRIPTION_MAX:
            raise ValidationFailed(
                f"bad request: description too long (max {DESCRIPTION_MAX} characters)"
            )

        # Read-merge-write: only the supplied fields change.
        if display_name is not None:
            user.display_name = display_name
        if pronouns is not None:
            user.pronouns = pronouns
        if description is not None:
            user.description = description

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
