"""Shared test fixtures."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone

import pytest

from dm_service.application.dto.message import MessageDraft
from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.entities.user import User
from dm_service.domain.policies.mailbox import chronological_key
from dm_service.domain.value_objects.enums import ArchiveParty, SortOrder

T0 = datetime(2024, 8, 9, 10, 30, tzinfo=timezone.utc)


def make_user(
    user_id: int = 42,
    username: str = "alice",
    full_name: str = "Alice de Vries",
    company_name: str | None = "Acme BV",
) -> User:
    return User(id=user_id, username=username, full_name=full_name, company_name=company_name)


def make_message(
    *,
    message_id: int = 1,
    sender: User | None = None,
    receiver: User | None = None,
    thread_id: int = 1,
    minutes: int = 0,
    subject: str = "Hallo",
    content: str = "hello",
    is_read: bool = False,
    archived_by_sender: bool = False,
    archived_by_receiver: bool = False,
) -> MessageRecord:
    return MessageRecord(
        id=message_id,
        sender=sender or make_user(),
        receiver=receiver or make_user(7, "bob", "Bob Jansen", None),
        timestamp=T0 + timedelta(minutes=minutes),
        subject=subject,
        content=content,
        thread_id=thread_id,
        is_read=is_read,
        archived_by_sender=archived_by_sender,
        archived_by_receiver=archived_by_receiver,
    )


@pytest.fixture
def alice() -> User:
    return make_user()


@pytest.fixture
def bob() -> User:
    return make_user(7, "bob", "Bob Jansen", None)


@pytest.fixture
def draft() -> MessageDraft:
    return MessageDraft(subject="Kennismaking", content="Heb je tijd voor een gesprek?")


@dataclass
class FixedClock:
    at: datetime = T0

    def now(self) -> datetime:
        return self.at


@dataclass
class FakeUserReader:
    _users: dict[int, User] = field(default_factory=dict)

    def add(self, *users: User) -> None:
        for user in users:
            self._users[user.id] = user

    async def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None


@dataclass
class FakeMessageReader:
    _messages: list[MessageRecord] = field(default_factory=list)

    async def get_by_id(self, message_id: int) -> MessageRecord | None:
        for m in self._messages:
            if m.id == message_id:
                return m
        return None

    async def list_inbox(self, user_id: int, *, order: SortOrder = SortOrder.DESC) -> list[MessageRecord]:
        return self._sorted(
            [m for m in self._messages if m.receiver.id == user_id and not m.archived_by_receiver],
            order,
        )

    async def list_outbox(self, user_id: int, *, order: SortOrder = SortOrder.DESC) -> list[MessageRecord]:
        return self._sorted(
            [m for m in self._messages if m.sender.id == user_id and not m.archived_by_sender],
            order,
        )

    async def list_thread(self, thread_id: int) -> list[MessageRecord]:
        return self._sorted([m for m in self._messages if m.thread_id == thread_id], SortOrder.ASC)

    @staticmethod
    def _sorted(messages: list[MessageRecord], order: SortOrder) -> list[MessageRecord]:
        return sorted(messages, key=chronological_key, reverse=order is SortOrder.DESC)


@dataclass
class FakeMessageWriter:
    """In-memory store with the same length limits as the messages table."""

    _reader: FakeMessageReader
    max_subject: int = 255
    max_content: int = 5000
    fail_with: Exception | None = None
    save_calls: list[MessageRecord] = field(default_factory=list)

    async def save(self, message: MessageRecord) -> MessageRecord | None:
        self.save_calls.append(message)
        if self.fail_with is not None:
            raise self.fail_with
        if len(message.subject) > self.max_subject or len(message.content) > self.max_content:
            return None
        new_id = max((m.id for m in self._reader._messages), default=0) + 1
        stored = replace(message, id=new_id, thread_id=message.thread_id or new_id)
        self._reader._messages.append(stored)
        return stored

    async def set_read(self, message_id: int, is_read: bool) -> None:
        self._update(message_id, is_read=is_read)

    async def set_archived(self, message_id: int, party: ArchiveParty) -> None:
        if party is ArchiveParty.SENDER:
            self._update(message_id, archived_by_sender=True)
        else:
            self._update(message_id, archived_by_receiver=True)

    def _update(self, message_id: int, **changes: bool) -> None:
        messages = self._reader._messages
        for i, m in enumerate(messages):
            if m.id == message_id:
                messages[i] = replace(m, **changes)


@dataclass
class FakeResolver:
    """Resolver stub returning a fixed user or raising."""

    user: User | None = None
    fail_with: Exception | None = None
    calls: list[tuple[MessageDraft, str | None]] = field(default_factory=list)

    async def resolve(self, message: MessageDraft, receiver_hint: str | None) -> User | None:
        self.calls.append((message, receiver_hint))
        if self.fail_with is not None:
            raise self.fail_with
        return self.user


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    users: FakeUserReader = field(default_factory=FakeUserReader)
    messages: FakeMessageReader = field(default_factory=FakeMessageReader)
    messages_w: FakeMessageWriter | None = None
    _committed: bool = False
    _rolled_back: bool = False

    def __post_init__(self) -> None:
        if self.messages_w is None:
            self.messages_w = FakeMessageWriter(self.messages)

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        self._rolled_back = True
