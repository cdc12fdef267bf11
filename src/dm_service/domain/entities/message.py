from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from dm_service.domain.entities.user import User
from dm_service.domain.value_objects.enums import ArchiveParty


@dataclass(frozen=True, slots=True, eq=False)
class MessageRecord:
    """A direct message between two users.

    Equality and hashing deliberately ignore ``subject``, ``content`` and
    ``timestamp``: two records are the same message when their id, parties,
    thread and flags match.
    """

    id: int
    sender: User | None
    receiver: User | None
    timestamp: datetime
    subject: str
    content: str
    thread_id: int
    is_read: bool
    archived_by_sender: bool
    archived_by_receiver: bool

    @classmethod
    def build(
        cls,
        *,
        id: int = 0,
        sender: User | None = None,
        receiver: User | None = None,
        timestamp: datetime | None = None,
        subject: str = "",
        content: str = "",
        thread_id: int = 0,
        is_read: bool = False,
        archived_by_sender: bool = False,
        archived_by_receiver: bool = False,
    ) -> MessageRecord:
        return cls(
            id=id,
            sender=sender,
            receiver=receiver,
            timestamp=timestamp or datetime.now(timezone.utc),
            subject=subject,
            content=content,
            thread_id=thread_id,
            is_read=is_read,
            archived_by_sender=archived_by_sender,
            archived_by_receiver=archived_by_receiver,
        )

    def _identity(self) -> tuple:
        return (
            self.id,
            self.sender,
            self.receiver,
            self.thread_id,
            self.is_read,
            self.archived_by_sender,
            self.archived_by_receiver,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    @property
    def is_persisted(self) -> bool:
        return self.id > 0

    def is_participant(self, user: User) -> bool:
        return user == self.sender or user == self.receiver

    def mark_read(self) -> MessageRecord:
        return replace(self, is_read=True)

    def mark_unread(self) -> MessageRecord:
        return replace(self, is_read=False)

    def archive_for(self, party: ArchiveParty) -> MessageRecord:
        if party is ArchiveParty.SENDER:
            return replace(self, archived_by_sender=True)
        return replace(self, archived_by_receiver=True)
