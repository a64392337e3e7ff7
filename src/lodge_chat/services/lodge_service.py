"""Lodge creation, membership, and lodge-scoped authorization."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from lodge_chat.core.errors import Forbidden, NotFound, ValidationFailed
from lodge_chat.models import Cabin, Lodge, LodgeCabin, LodgeMember, User
from lodge_chat.models.lodge import LODGE_DESCRIPTION_MAX, LODGE_NAME_MAX

logger = logging.getLogger(__name__)


class LodgeService:
    """Service handling lodges and the membership model around them."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_lodge(self, lodge_id: uuid.UUID) -> Lodge:
        """Return a lodge by id.

        Raises:
            NotFound: If no lodge has the given id.
        """
        lodge = self.db.get(Lodge, lodge_id)
        if lodge is None:
            raise NotFound("bad request: invalid lodge id")
        return lodge

    def list_public_lodges(self) -> Sequence[Lodge]:
        """Return every lodge that is discoverable without membership."""
        return (
            self.db.query(Lodge)
            .filter(Lodge.public.is_(True))
            .order_by(Lodge.creation_date)
            .all()
        )

    def create_lodge(
        self,
        user: User,
        name: str | None,
        description: str | None = None,
        icon_url: str | None = None,
        public: bool = True,
    ) -> Lodge:
        """Create a lodge and make its creator the founding admin.

        The lodge row and the founder's membership are committed together, so
        no other user can join the empty lodge first and take the admin seat.
        """
        if not name:
            raise ValidationFailed("bad request: name not present")
        if len(name) > LODGE_NAME_MAX:
            raise ValidationFailed(f"bad request: name too long (max {LODGE_NAME_MAX} characters)")
        if description and len(description) > LODGE_DESCRIPTION_MAX:
            raise ValidationFailed(
                f"bad request: description too long (max {LODGE_DESCRIPTION_MAX} characters)"
            )

        lodge = Lodge(
            id=uuid.uuid4(),
            name=name,
            description=description or "",
            icon_url=icon_url or "",
            public=public,
        )
        self.db.add(lodge)
        self.db.flush()
        self.db.add(LodgeMember(lodge_id=lodge.id, user_id=user.id, admin=True))
        self.db.commit()
        self.db.refresh(lodge)
        logger.info("User %s created lodge %s", user.id, lodge.id)
        return lodge

    def join(self, user: User, lodge: Lodge) -> LodgeMember:
        """Add ``user`` to ``lodge``; joining twice is a no-op.

        The first member of a lodge becomes its admin.
        """
        membership = self._membership(lodge, user)
        if membership is not None:
            return membership

        member_count = (
            self.db.query(func.count())
            .select_from(LodgeMember)
            .filter(LodgeMember.lodge_id == lodge.id)
            .scalar()
            or 0
        )
        membership = LodgeMember(lodge_id=lodge.id, user_id=user.id, admin=member_count == 0)
        self.db.add(membership)
        self.db.commit()
        self.db.refresh(membership)
        logger.info("User %s joined lodge %s (admin=%s)", user.id, lodge.id, membership.admin)
        return membership

    def is_member(self, lodge: Lodge, user: User) -> bool:
        """Return True if ``user`` belongs to ``lodge``."""
        return self._membership(lodge, user) is not None

    def is_admin(self, lodge: Lodge, user: User) -> bool:
        """Return True if ``user`` is an admin of ``lodge``."""
        membership = self._membership(lodge, user)
        return membership is not None and membership.admin

    def view(self, lodge_id: uuid.UUID, requester: User) -> Lodge:
        """Return a lodge the requester is allowed to see.

        Raises:
            NotFound: If the lodge does not exist.
            Forbidden: If the lodge is private and the requester is not a member.
        """
        lodge = self.get_lodge(lodge_id)
        if not lodge.public and not self.is_member(lodge, requester):
            logger.warning("User %s denied view of private lodge %s", requester.id, lodge.id)
            raise Forbidden("forbidden: lodge is private")
        return lodge

    def members(self, lodge: Lodge) -> list[User]:
        """Return every member of ``lodge`` in join order."""
        rows = (
            self.db.query(LodgeMember)
            .filter(LodgeMember.lodge_id == lodge.id)
            .order_by(LodgeMember.join_date)
            .all()
        )
        return [row.user for row in rows]

    def admins(self, lodge: Lodge) -> list[User]:
        """Return the admins of ``lodge`` in join order."""
        rows = (
            self.db.query(LodgeMember)
            .filter(LodgeMember.lodge_id == lodge.id, LodgeMember.admin.is_(True))
            .order_by(LodgeMember.join_date)
            .all()
        )
        return [row.user for row in rows]

    def cabins(self, lodge: Lodge, requester: User) -> list[Cabin]:
        """Return the cabins of ``lodge`` visible to ``requester``.

        Admin-only cabins are listed for lodge admins only.
        """
        query = (
            self.db.query(Cabin)
            .join(LodgeCabin, LodgeCabin.cabin_id == Cabin.id)
            .filter(LodgeCabin.lodge_id == lodge.id)
        )
        if not self.is_admin(lodge, requester):
            query = query.filter(Cabin.require_admin.is_(False))
        return query.order_by(Cabin.creation_date).all()

    def _membership(self, lodge: Lodge, user: User) -> LodgeMember | None:
        return self.db.get(LodgeMember, (lodge.id, user.id))
