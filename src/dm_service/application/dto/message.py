from __future__ import annotations

from dataclasses import dataclass

from dm_service.application.ports.clock import Clock, UtcClock
from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.entities.user import User


@dataclass(slots=True)
class MessageDraft:
    """Mutable payload bound from the transport layer.

    ``sender`` and ``receiver`` are filled in by the create workflow; any
    value the caller supplied for them is overwritten.
    """

    subject: str = ""
    content: str = ""
    receiver_username: str | None = None
    thread_id: int | None = None
    sender: User | None = None
    receiver: User | None = None

    def to_record(self, clock: Clock | None = None) -> MessageRecord:
        if self.sender is None or self.receiver is None:
            raise ValueError("draft must have both sender and receiver assigned")
        return MessageRecord.build(
            sender=self.sender,
            receiver=self.receiver,
            timestamp=(clock or UtcClock()).now(),
            subject=self.subject,
            content=self.content,
            thread_id=self.thread_id or 0,
        )
