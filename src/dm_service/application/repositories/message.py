from __future__ import annotations

from typing import Protocol

from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.value_objects.enums import ArchiveParty, SortOrder


class MessageReader(Protocol):
    async def get_by_id(self, message_id: int) -> MessageRecord | None: ...

    async def list_inbox(
        self, user_id: int, *, order: SortOrder = SortOrder.DESC,
    ) -> list[MessageRecord]: ...

    async def list_outbox(
        self, user_id: int, *, order: SortOrder = SortOrder.DESC,
    ) -> list[MessageRecord]: ...

    async def list_thread(self, thread_id: int) -> list[MessageRecord]: ...


class MessageWriter(Protocol):
    async def save(self, message: MessageRecord) -> MessageRecord | None:
        """Persist a new message. Return it with id assigned, or None if the store rejects it."""
        ...

    async def set_read(self, message_id: int, is_read: bool) -> None: ...

    async def set_archived(self, message_id: int, party: ArchiveParty) -> None: ...
