from __future__ import annotations

from typing import Protocol

from dm_service.application.repositories.message import MessageReader, MessageWriter
from dm_service.application.repositories.user import UserReader


class UnitOfWork(Protocol):
    users: UserReader
    messages: MessageReader
    messages_w: MessageWriter

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...
