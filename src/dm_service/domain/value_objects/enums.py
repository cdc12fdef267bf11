from __future__ import annotations

from enum import StrEnum


class ArchiveParty(StrEnum):
    SENDER = "sender"
    RECEIVER = "receiver"


class Mailbox(StrEnum):
    INBOX = "inbox"
    OUTBOX = "outbox"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"
