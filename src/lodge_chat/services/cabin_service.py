"""Cabin management and messaging."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import desc
from sqlalchemy.orm import Session

from lodge_chat.core.errors import Forbidden, NotFound, ValidationFailed
from lodge_chat.models import Cabin, CabinMessage, Lodge, LodgeCabin, Message, User
from lodge_chat.models.cabin import CABIN_NAME_MAX, CABIN_TOPIC_MAX, MESSAGE_CONTENT_MAX
from lodge_chat.services.lodge_service import LodgeService

logger = logging.getLogger(__name__)


class CabinService:
    """Service handling cabins and the messages posted in them."""

    def __init__(self, db: Session, lodges: LodgeService | None = None) -> None:
        self.db = db
        self.lodges = lodges or LodgeService(db)

    def create_cabin(
        self,
        lodge: Lodge,
        user: User,
        name: str | None,
        topic: str | None = None,
        require_admin: bool = False,
    ) -> Cabin:
        """Create a cabin in ``lodge``. Only lodge admins may do this.

        Raises:
            Forbidden: If ``user`` is not an admin of ``lodge``.
            ValidationFailed: If the name is missing or a field is too long.
        """
        if not self.lodges.is_admin(lodge, user):
            logger.warning("User %s denied cabin creation in lodge %s", user.id, lodge.id)
            raise Forbidden("forbidden: only lodge admins may create cabins")
        if not name:
            raise ValidationFailed("bad request: name not present")
        if len(name) > CABIN_NAME_MAX:
            raise ValidationFailed(f"bad request: name too long (max {CABIN_NAME_MAX} characters)")
        if topic and len(topic) > CABIN_TOPIC_MAX:
            raise ValidationFailed(
                f"bad request: topic too long (max {CABIN_TOPIC_MAX} characters)"
            )

        cabin = Cabin(
            id=uuid.uuid4(),
            name=name,
            topic=topic or "",
            lodge_id=lodge.id,
            require_admin=require_admin,
        )
        self.db.add(cabin)
        self.db.flush()
        self.db.add(LodgeCabin(lodge_id=lodge.id, cabin_id=cabin.id))
        self.db.commit()
        self.db.refresh(cabin)
        logger.info("User %s created cabin %s in lodge %s", user.id, cabin.id, lodge.id)
        return cabin

    def get_cabin(self, lodge: Lodge, cabin_id: uuid.UUID) -> Cabin:
        """Return the cabin with ``cabin_id`` owned by ``lodge``.

        A cabin id from another lodge does not resolve.

        Raises:
            NotFound: If the lodge owns no such cabin.
        """
        cabin = (
            self.db.query(Cabin)
            .filter(Cabin.id == cabin_id, Cabin.lodge_id == lodge.id)
            .first()
        )
        if cabin is None:
            raise NotFound("bad request: invalid cabin id")
        return cabin

    def ensure_can_read(self, cabin: Cabin, user: User) -> None:
        """Raise Forbidden unless ``user`` may read ``cabin``.

        Readers need to see the lodge (public or member); admin-only cabins
        additionally need a lodge admin.
        """
        lodge = cabin.lodge
        if not lodge.public and not self.lodges.is_member(lodge, user):
            raise Forbidden("forbidden: lodge is private")
        if cabin.require_admin and not self.lodges.is_admin(lodge, user):
            raise Forbidden("forbidden: cabin requires admin")

    def ensure_can_post(self, cabin: Cabin, user: User) -> None:
        """Raise Forbidden unless ``user`` may post in ``cabin``."""
        lodge = cabin.lodge
        if not self.lodges.is_member(lodge, user):
            raise Forbidden("forbidden: not a member of this lodge")
        if cabin.require_admin and not self.lodges.is_admin(lodge, user):
            raise Forbidden("forbidden: cabin requires admin")

    def send_message(self, cabin: Cabin, user: User, content: str | None) -> Message:
        """Post ``content`` to ``cabin`` as ``user``.

        Raises:
            Forbidden: If ``user`` may not post in the cabin.
            ValidationFailed: If the content is missing or too long.
        """
        self.ensure_can_post(cabin, user)
        if not content:
            raise ValidationFailed("bad request: content not present")
        if len(content) > MESSAGE_CONTENT_MAX:
            raise ValidationFailed(
                f"bad request: content too long (max {MESSAGE_CONTENT_MAX} characters)"
            )

        message = Message(
            id=uuid.uuid4(),
            user_id=user.id,
            content=content,
            lodge_id=cabin.lodge_id,
            cabin_id=cabin.id,
        )
        self.db.add(message)
        self.db.flush()
        self.db.add(CabinMessage(cabin_id=cabin.id, message_id=message.id))
        self.db.commit()
        self.db.refresh(message)
        return message

    def list_messages(self, cabin: Cabin, user: User) -> list[Message]:
        """Return every message in ``cabin``, newest first.

        Raises:
            Forbidden: If ``user`` may not read the cabin.
        """
        self.ensure_can_read(cabin, user)
        return (
            self.db.query(Message)
            .join(CabinMessage, CabinMessage.message_id == Message.id)
            .filter(CabinMessage.cabin_id == cabin.id)
            .order_by(desc(Message.creation_date), desc(CabinMessage.position))
            .all()
        )
