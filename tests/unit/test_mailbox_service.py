from __future__ import annotations

import pytest

from dm_service.application.exceptions import ForbiddenError, NotFoundError
from dm_service.domain.value_objects.enums import ArchiveParty, SortOrder
from dm_service.services import mailbox_service
from tests.conftest import FakeUoW, make_message, make_user


@pytest.fixture
def uow(alice, bob) -> FakeUoW:
    uow = FakeUoW()
    uow.users.add(alice, bob)
    uow.messages._messages.extend([
        make_message(message_id=1, sender=alice, receiver=bob, thread_id=1, minutes=0),
        make_message(message_id=2, sender=bob, receiver=alice, thread_id=1, minutes=5),
        make_message(message_id=3, sender=alice, receiver=bob, thread_id=3, minutes=10),
    ])
    return uow


@pytest.mark.asyncio
async def test_inbox_lists_received_newest_first(bob, uow):
    inbox = await mailbox_service.list_inbox(bob, SortOrder.DESC, uow)
    assert [m.id for m in inbox] == [3, 1]


@pytest.mark.asyncio
async def test_outbox_ascending(alice, uow):
    outbox = await mailbox_service.list_outbox(alice, SortOrder.ASC, uow)
    assert [m.id for m in outbox] == [1, 3]


@pytest.mark.asyncio
async def test_thread_for_participant(alice, uow):
    thread = await mailbox_service.get_thread(1, alice, uow)
    assert [m.id for m in thread] == [1, 2]


@pytest.mark.asyncio
async def test_thread_forbidden_for_outsider(uow):
    with pytest.raises(ForbiddenError):
        await mailbox_service.get_thread(1, make_user(99, "carol"), uow)


@pytest.mark.asyncio
async def test_missing_thread(alice, uow):
    with pytest.raises(NotFoundError):
        await mailbox_service.get_thread(404, alice, uow)


@pytest.mark.asyncio
async def test_get_message_checks_participation(alice, uow):
    assert (await mailbox_service.get_message(1, alice, uow)).id == 1
    with pytest.raises(ForbiddenError):
        await mailbox_service.get_message(1, make_user(99, "carol"), uow)
    with pytest.raises(NotFoundError):
        await mailbox_service.get_message(404, alice, uow)


@pytest.mark.asyncio
async def test_read_flag_is_shared_between_parties(alice, bob, uow):
    read = await mailbox_service.set_read(1, True, bob, uow)
    assert read.is_read is True
    assert (await mailbox_service.get_message(1, alice, uow)).is_read is True

    unread = await mailbox_service.set_read(1, False, alice, uow)
    assert unread.is_read is False
    assert uow._committed is True


@pytest.mark.asyncio
async def test_archive_by_sender_keeps_receiver_view(alice, bob, uow):
    archived = await mailbox_service.archive(1, ArchiveParty.SENDER, alice, uow)

    assert archived.archived_by_sender is True
    assert archived.archived_by_receiver is False
    assert [m.id for m in await mailbox_service.list_outbox(alice, SortOrder.ASC, uow)] == [3]
    assert [m.id for m in await mailbox_service.list_inbox(bob, SortOrder.ASC, uow)] == [1, 3]


@pytest.mark.asyncio
async def test_archive_by_both_keeps_single_record(alice, bob, uow):
    await mailbox_service.archive(1, ArchiveParty.SENDER, alice, uow)
    await mailbox_service.archive(1, ArchiveParty.RECEIVER, bob, uow)

    stored = [m for m in uow.messages._messages if m.id == 1]
    assert len(stored) == 1
    assert stored[0].archived_by_sender and stored[0].archived_by_receiver


@pytest.mark.asyncio
async def test_only_owner_may_archive_for_party(alice, bob, uow):
    with pytest.raises(ForbiddenError):
        await mailbox_service.archive(1, ArchiveParty.RECEIVER, alice, uow)
    with pytest.raises(ForbiddenError):
        await mailbox_service.archive(1, ArchiveParty.SENDER, bob, uow)


@pytest.mark.asyncio
async def test_thread_shows_only_own_messages(alice, bob, uow):
    carol = make_user(99, "carol")
    uow.messages._messages.extend([
        make_message(message_id=4, sender=alice, receiver=bob, thread_id=4, content="geheim voor bob"),
        make_message(message_id=5, sender=carol, receiver=alice, thread_id=4, minutes=1),
    ])

    carol_view = await mailbox_service.get_thread(4, carol, uow)
    assert [m.id for m in carol_view] == [5]
    assert all(m.content != "geheim voor bob" for m in carol_view)

    bob_view = await mailbox_service.get_thread(4, bob, uow)
    assert [m.id for m in bob_view] == [4]
    assert [m.id for m in await mailbox_service.get_thread(4, alice, uow)] == [4, 5]
