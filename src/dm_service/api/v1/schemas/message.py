from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from dm_service.application.dto.message import MessageDraft
from dm_service.domain.entities.message import MessageRecord


class CreateMessageRequest(BaseModel):
    """Incoming message payload. Sender and receiver objects, if sent, are ignored."""

    subject: str = ""
    content: str = Field(
        default="",
        validation_alias=AliasChoices("content", "messageContent"),
    )
    receiver_username: str | None = Field(
        default=None,
        validation_alias=AliasChoices("receiver_username", "receiverUsername"),
    )
    thread_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("thread_id", "threadId"),
    )

    def to_draft(self) -> MessageDraft:
        return MessageDraft(
            subject=self.subject,
            content=self.content,
            receiver_username=self.receiver_username,
            thread_id=self.thread_id,
        )


class EnvelopeResponse(BaseModel):
    success: bool
    message: str

    model_config = {"from_attributes": True}


class MessageView(BaseModel):
    """A message as shown to a user, with display names of both parties."""

    id: int
    thread_id: int
    timestamp: datetime
    subject: str
    content: str
    is_read: bool
    archived_by_sender: bool
    archived_by_receiver: bool
    sender_username: str | None = None
    sender_full_name: str | None = None
    sender_company_name: str | None = None
    receiver_username: str | None = None
    receiver_full_name: str | None = None
    receiver_company_name: str | None = None

    @classmethod
    def from_record(cls, record: MessageRecord) -> MessageView:
        sender, receiver = record.sender, record.receiver
        return cls(
            id=record.id,
            thread_id=record.thread_id,
            timestamp=record.timestamp,
            subject=record.subject,
            content=record.content,
            is_read=record.is_read,
            archived_by_sender=record.archived_by_sender,
            archived_by_receiver=record.archived_by_receiver,
            sender_username=sender.username if sender else None,
            sender_full_name=sender.full_name if sender else None,
            sender_company_name=sender.company_name if sender else None,
            receiver_username=receiver.username if receiver else None,
            receiver_full_name=receiver.full_name if receiver else None,
            receiver_company_name=receiver.company_name if receiver else None,
        )
