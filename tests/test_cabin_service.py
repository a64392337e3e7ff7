"""Tests for cabin creation, access rules, and messaging."""

import uuid

import pytest

from lodge_chat.core.errors import Forbidden, NotFound, ValidationFailed
from lodge_chat.models import Cabin, CabinMessage, LodgeCabin, Message
from lodge_chat.services import CabinService, LodgeService


class TestCreateCabin:
    """CabinService.create_cabin behaviour."""

    def test_admin_creates_cabin(self, db_session, test_user, private_lodge) -> None:
        cabin = CabinService(db_session).create_cabin(private_lodge, test_user, "general")

        assert cabin.lodge_id == private_lodge.id
        assert cabin.topic == ""
        assert cabin.require_admin is False
        link = db_session.get(LodgeCabin, (private_lodge.id, cabin.id))
        assert link is not None

    def test_non_member_denied(self, db_session, other_user, private_lodge) -> None:
        with pytest.raises(Forbidden) as exc_info:
            CabinService(db_session).create_cabin(private_lodge, other_user, "general")
        assert exc_info.value.status_code == 403
        assert db_session.query(Cabin).count() == 0

    def test_plain_member_denied(self, db_session, other_user, public_lodge) -> None:
        LodgeService(db_session).join(other_user, public_lodge)
        with pytest.raises(Forbidden):
            CabinService(db_session).create_cabin(public_lodge, other_user, "general")
        assert db_session.query(Cabin).count() == 0

    def test_permission_checked_before_validation(self, db_session, other_user, public_lodge) -> None:
        with pytest.raises(Forbidden):
            CabinService(db_session).create_cabin(public_lodge, other_user, "x" * 40)

    @pytest.mark.parametrize(
        ("name", "topic", "match"),
        [
            (None, None, "name not present"),
            ("", None, "name not present"),
            ("x" * 17, None, "name too long"),
            ("general", "x" * 129, "topic too long"),
        ],
    )
    def test_invalid_fields(self, db_session, test_user, public_lodge, name, topic, match) -> None:
        with pytest.raises(ValidationFailed, match=match):
            CabinService(db_session).create_cabin(public_lodge, test_user, name, topic=topic)


class TestGetCabin:
    """CabinService.get_cabin behaviour."""

    def test_get_cabin(self, db_session, public_lodge, cabin) -> None:
        assert CabinService(db_session).get_cabin(public_lodge, cabin.id).name == "general"

    def test_unknown_cabin(self, db_session, public_lodge) -> None:
        with pytest.raises(NotFound, match="invalid cabin id"):
            CabinService(db_session).get_cabin(public_lodge, uuid.uuid4())

    def test_cabin_from_another_lodge(self, db_session, private_lodge, cabin) -> None:
        with pytest.raises(NotFound):
            CabinService(db_session).get_cabin(private_lodge, cabin.id)


class TestMessages:
    """Posting and listing messages."""

    def test_send_message(self, db_session, test_user, cabin) -> None:
        message = CabinService(db_session).send_message(cabin, test_user, "hello")

        assert message.content == "hello"
        assert message.user_id == test_user.id
        assert message.cabin_id == cabin.id
        assert message.lodge_id == cabin.lodge_id
        link = db_session.query(CabinMessage).filter(CabinMessage.message_id == message.id).one()
        assert link.cabin_id == cabin.id

    def test_newest_first(self, db_session, test_user, cabin) -> None:
        service = CabinService(db_session)
        for content in ("A", "B", "C"):
            service.send_message(cabin, test_user, content)

        assert [m.content for m in service.list_messages(cabin, test_user)] == ["C", "B", "A"]

    def test_empty_cabin(self, db_session, test_user, cabin) -> None:
        assert CabinService(db_session).list_messages(cabin, test_user) == []

    def test_messages_stay_in_their_cabin(self, db_session, test_user, public_lodge, cabin) -> None:
        service = CabinService(db_session)
        other = service.create_cabin(public_lodge, test_user, "random")
        service.send_message(cabin, test_user, "in general")
        service.send_message(other, test_user, "in random")

        assert [m.content for m in service.list_messages(other, test_user)] == ["in random"]

    @pytest.mark.parametrize("content", [None, ""])
    def test_content_required(self, db_session, test_user, cabin, content) -> None:
        with pytest.raises(ValidationFailed, match="content not present"):
            CabinService(db_session).send_message(cabin, test_user, content)

    def test_content_too_long(self, db_session, test_user, cabin) -> None:
        with pytest.raises(ValidationFailed, match="content too long"):
            CabinService(db_session).send_message(cabin, test_user, "x" * 2049)
        assert db_session.query(Message).count() == 0

    def test_content_at_limit(self, db_session, test_user, cabin) -> None:
        message = CabinService(db_session).send_message(cabin, test_user, "x" * 2048)
        assert len(message.content) == 2048

    def test_non_member_cannot_post(self, db_session, other_user, cabin) -> None:
        with pytest.raises(Forbidden, match="not a member"):
            CabinService(db_session).send_message(cabin, other_user, "hi")
        assert db_session.query(Message).count() == 0

    def test_non_member_reads_public_lodge(self, db_session, test_user, other_user, cabin) -> None:
        service = CabinService(db_session)
        service.send_message(cabin, test_user, "welcome")
        assert [m.content for m in service.list_messages(cabin, other_user)] == ["welcome"]

    def test_non_member_cannot_read_private_lodge(
        self, db_session, test_user, other_user, private_lodge
    ) -> None:
        service = CabinService(db_session)
        cabin = service.create_cabin(private_lodge, test_user, "secret")
        with pytest.raises(Forbidden, match="private"):
            service.list_messages(cabin, other_user)


class TestRequireAdmin:
    """Admin-only cabins."""

    def test_member_cannot_post(self, db_session, other_user, public_lodge, admin_cabin) -> None:
        LodgeService(db_session).join(other_user, public_lodge)
        with pytest.raises(Forbidden, match="requires admin"):
            CabinService(db_session).send_message(admin_cabin, other_user, "hi")

    def test_member_cannot_read(self, db_session, other_user, public_lodge, admin_cabin) -> None:
        LodgeService(db_session).join(other_user, public_lodge)
        with pytest.raises(Forbidden, match="requires admin"):
            CabinService(db_session).list_messages(admin_cabin, other_user)

    def test_admin_can_post_and_read(self, db_session, test_user, admin_cabin) -> None:
        service = CabinService(db_session)
        service.send_message(admin_cabin, test_user, "staff only")
        assert [m.content for m in service.list_messages(admin_cabin, test_user)] == ["staff only"]
