from __future__ import annotations

from dm_service.application.exceptions import ForbiddenError, NotFoundError
from dm_service.application.policies.permissions import assert_message_access
from dm_service.application.uow import UnitOfWork
from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.entities.user import User
from dm_service.domain.policies.mailbox import mailbox_view, thread_of
from dm_service.domain.value_objects.enums import ArchiveParty, Mailbox, SortOrder


async def list_inbox(user: User, order: SortOrder, uow: UnitOfWork) -> list[MessageRecord]:
    messages = await uow.messages.list_inbox(user.id, order=order)
    return mailbox_view(messages, user, Mailbox.INBOX, order)


async def list_outbox(user: User, order: SortOrder, uow: UnitOfWork) -> list[MessageRecord]:
    messages = await uow.messages.list_outbox(user.id, order=order)
    return mailbox_view(messages, user, Mailbox.OUTBOX, order)


async def get_message(message_id: int, user: User, uow: UnitOfWork) -> MessageRecord:
    message = await uow.messages.get_by_id(message_id)
    return assert_message_access(message, user)


async def get_thread(thread_id: int, user: User, uow: UnitOfWork) -> list[MessageRecord]:
    """The user's own messages in a thread, oldest first.

    Messages of the thread the user neither sent nor received are left out.
    """
    messages = await uow.messages.list_thread(thread_id)
    if not messages:
        raise NotFoundError("Thread not found")
    visible = [m for m in messages if m.is_participant(user)]
    if not visible:
        raise ForbiddenError("Not a participant of this thread")
    return thread_of(visible, thread_id)


async def set_read(
    message_id: int,
    is_read: bool,
    user: User,
    uow: UnitOfWork,
) -> MessageRecord:
    """Toggle the shared read flag. Either party may do so."""
    message = await get_message(message_id, user, uow)
    await uow.messages_w.set_read(message.id, is_read)
    await uow.commit()
    return message.mark_read() if is_read else message.mark_unread()


async def archive(
    message_id: int,
    party: ArchiveParty,
    user: User,
    uow: UnitOfWork,
) -> MessageRecord:
    """Hide a message from one party's mailbox; the other party still sees it."""
    message = await get_message(message_id, user, uow)
    owner = message.sender if party is ArchiveParty.SENDER else message.receiver
    if owner != user:
        raise ForbiddenError(f"Only the {party} may archive this message for the {party}")
    await uow.messages_w.set_archived(message.id, party)
    await uow.commit()
    return message.archive_for(party)
