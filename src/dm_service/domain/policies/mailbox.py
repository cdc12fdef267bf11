"""Threading and per-party visibility rules for direct messages."""
from __future__ import annotations

from collections.abc import Iterable

from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.entities.user import User
from dm_service.domain.value_objects.enums import Mailbox, SortOrder


def chronological_key(message: MessageRecord) -> tuple:
    return message.timestamp, message.id


def thread_of(messages: Iterable[MessageRecord], thread_id: int) -> list[MessageRecord]:
    """Messages of one conversation, oldest first; ties broken by id."""
    return sorted(
        (m for m in messages if m.thread_id == thread_id),
        key=chronological_key,
    )


def is_visible_to(message: MessageRecord, user: User, mailbox: Mailbox) -> bool:
    if mailbox is Mailbox.INBOX:
        return message.receiver == user and not message.archived_by_receiver
    return message.sender == user and not message.archived_by_sender


def mailbox_view(
    messages: Iterable[MessageRecord],
    user: User,
    mailbox: Mailbox,
    order: SortOrder = SortOrder.DESC,
) -> list[MessageRecord]:
    return sorted(
        (m for m in messages if is_visible_to(m, user, mailbox)),
        key=chronological_key,
        reverse=order is SortOrder.DESC,
    )


def may_continue_thread(messages: Iterable[MessageRecord], sender: User, receiver: User) -> bool:
    """A reply joins a thread only if the same two users already talk in it."""
    pair = {sender, receiver}
    return any({m.sender, m.receiver} == pair for m in messages)
