from __future__ import annotations

import logging

from dm_service.application.dto.envelope import SendResult
from dm_service.application.dto.message import MessageDraft
from dm_service.application.exceptions import AuthenticationError
from dm_service.application.ports.clock import Clock
from dm_service.application.ports.resolver import ReceiverResolver
from dm_service.application.uow import UnitOfWork
from dm_service.domain.entities.user import User
from dm_service.domain.policies.mailbox import may_continue_thread
from dm_service.services.receiver_resolver import addressed_username

logger = logging.getLogger(__name__)


async def create_message(
    sender: User,
    message: MessageDraft,
    receiver_hint: str | None,
    uow: UnitOfWork,
    resolver: ReceiverResolver,
    clock: Clock | None = None,
) -> SendResult:
    """Address, persist and report on a new message from an authenticated sender.

    Never raises for addressing, store or runtime problems: each becomes a
    failed ``SendResult``. Authentication errors are not caught here.
    """
    message.sender = sender

    try:
        receiver = await resolver.resolve(message, receiver_hint)
        if receiver is None:
            username = addressed_username(message, receiver_hint)
            logger.info("Receiver %r not found for sender %s", username, sender.id)
            return SendResult.receiver_not_found(username)
        message.receiver = receiver

        if message.thread_id:
            thread = await uow.messages.list_thread(message.thread_id)
            if not may_continue_thread(thread, sender, receiver):
                logger.info(
                    "Thread %s is not between %s and %s, starting a new one",
                    message.thread_id, sender.id, receiver.id,
                )
                message.thread_id = None

        saved = await uow.messages_w.save(message.to_record(clock))
        if saved is None:
            await uow.rollback()
            logger.info("Store rejected message from %s to %s", sender.id, receiver.id)
            return SendResult.content_too_long()

        await uow.commit()
    except AuthenticationError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Sending message from %s failed", sender.id)
        await uow.rollback()
        return SendResult.unexpected(exc)

    logger.info("Message %s sent in thread %s", saved.id, saved.thread_id)
    return SendResult.sent(saved)
