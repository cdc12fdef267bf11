from __future__ import annotations

from dm_service.domain.entities.message import MessageRecord
from dm_service.infrastructure.db.mappers import user as user_mapper
from dm_service.infrastructure.db.models.message import MessageModel


def model_to_entity(model: MessageModel) -> MessageRecord:
    return MessageRecord(
        id=model.id,
        sender=user_mapper.model_to_entity(model.sender),
        receiver=user_mapper.model_to_entity(model.receiver),
        timestamp=model.sent_at,
        subject=model.subject,
        content=model.content,
        thread_id=model.thread_id,
        is_read=model.is_read,
        archived_by_sender=model.archived_by_sender,
        archived_by_receiver=model.archived_by_receiver,
    )


def entity_to_model(entity: MessageRecord) -> MessageModel:
    if entity.sender is None or entity.receiver is None:
        raise ValueError("Message needs both a sender and a receiver before it is stored")
    return MessageModel(
        sender_id=entity.sender.id,
        receiver_id=entity.receiver.id,
        sent_at=entity.timestamp,
        subject=entity.subject,
        content=entity.content,
        thread_id=entity.thread_id,
        is_read=entity.is_read,
        archived_by_sender=entity.archived_by_sender,
        archived_by_receiver=entity.archived_by_receiver,
    )
