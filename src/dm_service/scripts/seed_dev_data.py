"""Seed development data: creates the schema, two users and a short thread."""
from __future__ import annotations

import asyncio
import logging

from dm_service.application.dto.message import MessageDraft
from dm_service.infrastructure.db import models  # noqa: F401
from dm_service.infrastructure.db.base import Base
from dm_service.infrastructure.db.mappers import user as user_mapper
from dm_service.infrastructure.db.models.user import UserModel
from dm_service.infrastructure.db.session import AsyncSessionLocal, engine
from dm_service.infrastructure.db.uow import SqlAlchemyUoW

logger = logging.getLogger(__name__)


async def seed() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)

        alice_model = UserModel(username="alice", full_name="Alice de Vries", company_name="Acme BV")
        bob_model = UserModel(username="bob", full_name="Bob Jansen", company_name=None)
        session.add_all([alice_model, bob_model])
        await uow.flush()
        alice = user_mapper.model_to_entity(alice_model)
        bob = user_mapper.model_to_entity(bob_model)

        opener = MessageDraft(
            subject="Kennismaking",
            content="Hoi Bob, heb je tijd voor een gesprek?",
            sender=alice,
            receiver=bob,
        )
        first = await uow.messages_w.save(opener.to_record())
        assert first is not None

        replies = [
            (bob, alice, "Zeker, dinsdag schikt mij."),
            (alice, bob, "Prima, tot dinsdag!"),
        ]
        for sender, receiver, content in replies:
            draft = MessageDraft(
                subject=f"Re: {opener.subject}",
                content=content,
                thread_id=first.thread_id,
                sender=sender,
                receiver=receiver,
            )
            await uow.messages_w.save(draft.to_record())

        await uow.commit()
        logger.info("Seeded thread %s with %d messages", first.thread_id, len(replies) + 1)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
