from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy import select, update
from sqlalchemy.exc import DataError
from sqlalchemy.ext.asyncio import AsyncSession

from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.value_objects.enums import ArchiveParty, SortOrder
from dm_service.infrastructure.db.mappers import message as mapper
from dm_service.infrastructure.db.models.message import (
    CONTENT_MAX_LENGTH,
    SUBJECT_MAX_LENGTH,
    MessageModel,
)

logger = logging.getLogger(__name__)


def _timeline(order: SortOrder) -> tuple:
    if order is SortOrder.ASC:
        return MessageModel.sent_at.asc(), MessageModel.id.asc()
    return MessageModel.sent_at.desc(), MessageModel.id.desc()


class MessageReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, message_id: int) -> MessageRecord | None:
        model = await self._session.get(MessageModel, message_id)
        return mapper.model_to_entity(model) if model else None

    async def list_inbox(
        self, user_id: int, *, order: SortOrder = SortOrder.DESC,
    ) -> list[MessageRecord]:
        stmt = (
            select(MessageModel)
            .where(
                MessageModel.receiver_id == user_id,
                MessageModel.archived_by_receiver.is_(False),
            )
            .order_by(*_timeline(order))
        )
        return await self._fetch(stmt)

    async def list_outbox(
        self, user_id: int, *, order: SortOrder = SortOrder.DESC,
    ) -> list[MessageRecord]:
        stmt = (
            select(MessageModel)
            .where(
                MessageModel.sender_id == user_id,
                MessageModel.archived_by_sender.is_(False),
            )
            .order_by(*_timeline(order))
        )
        return await self._fetch(stmt)

    async def list_thread(self, thread_id: int) -> list[MessageRecord]:
        stmt = (
            select(MessageModel)
            .where(MessageModel.thread_id == thread_id)
            .order_by(*_timeline(SortOrder.ASC))
        )
        return await self._fetch(stmt)

    async def _fetch(self, stmt) -> list[MessageRecord]:
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class MessageWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, message: MessageRecord) -> MessageRecord | None:
        """Insert a new message. Returns None when it violates column limits."""
        if len(message.subject) > SUBJECT_MAX_LENGTH or len(message.content) > CONTENT_MAX_LENGTH:
            logger.debug(
                "Rejecting message: subject=%d chars, content=%d chars",
                len(message.subject),
                len(message.content),
            )
            return None

        model = mapper.entity_to_model(message)
        try:
            async with self._session.begin_nested():
                self._session.add(model)
                await self._session.flush()
                # A message without a thread starts a new one named after itself
                if not model.thread_id:
                    model.thread_id = model.id
                    await self._session.flush()
        except DataError:
            logger.debug("Database rejected message", exc_info=True)
            return None

        return replace(message, id=model.id, thread_id=model.thread_id)

    async def set_read(self, message_id: int, is_read: bool) -> None:
        stmt = (
            update(MessageModel)
            .where(MessageModel.id == message_id)
            .values(is_read=is_read)
        )
        await self._session.execute(stmt)

    async def set_archived(self, message_id: int, party: ArchiveParty) -> None:
        column = "archived_by_sender" if party is ArchiveParty.SENDER else "archived_by_receiver"
        stmt = (
            update(MessageModel)
            .where(MessageModel.id == message_id)
            .values({column: True})
        )
        await self._session.execute(stmt)
