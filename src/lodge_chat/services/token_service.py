"""Bearer token issuance, reset, and lookup."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from lodge_chat.core.security import generate_token
from lodge_chat.models import Token, User

logger = logging.getLogger(__name__)


class TokenService:
    """Keeps exactly one live token per user."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def issue(self, user: User) -> Token:
        """Return the user's live token, creating one if none exists."""
        existing = self.db.get(Token, user.id)
        if existing is not None:
            return existing
        return self._create(user)

    def reset(self, user: User) -> Token:
        """Delete the user's token, if any, and issue a fresh one.

        Whoever held the previous string can no longer authenticate with it.
        """
        existing = self.db.get(Token, user.id)
        if existing is not None:
            self.db.delete(existing)
            self.db.flush()
        token = self._create(user)
        logger.info("Reset token for user %s", user.id)
        return token

    def resolve(self, token: str | None) -> User | None:
        """Return the user owning ``token`` by exact match, or None."""
        if not token:
            return None
        row = self.db.query(Token).filter(Token.token == token).first()
        if row is None:
            return None
        return row.user

    def _create(self, user: User) -> Token:
        token = Token(user_id=user.id, token=generate_token())
        self.db.add(token)
        self.db.commit()
        self.db.refresh(token)
        return token
