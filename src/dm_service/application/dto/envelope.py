from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dm_service.domain.entities.message import MessageRecord

SENT_TEXT = "Bericht succesvol verzonden."
RECEIVER_NOT_FOUND_TEXT = "Gebruiker met gebruikersnaam {username} niet gevonden"
CONTENT_TOO_LONG_TEXT = "Bericht sturen niet succesvol. Onderwerp of bericht is te lang."
UNEXPECTED_TEXT = "Er is een fout opgetreden {error}"


class SendFailure(StrEnum):
    RECEIVER_NOT_FOUND = "receiver_not_found"
    CONTENT_TOO_LONG = "content_too_long"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    success: bool
    message: str

    def as_dict(self) -> dict[str, object]:
        return {"success": self.success, "message": self.message}


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of the create workflow: a stored record or exactly one failure kind."""

    record: MessageRecord | None = None
    failure: SendFailure | None = None
    detail: str = ""

    @classmethod
    def sent(cls, record: MessageRecord) -> SendResult:
        return cls(record=record, detail=SENT_TEXT)

    @classmethod
    def receiver_not_found(cls, username: str | None) -> SendResult:
        return cls(
            failure=SendFailure.RECEIVER_NOT_FOUND,
            detail=RECEIVER_NOT_FOUND_TEXT.format(username=username),
        )

    @classmethod
    def content_too_long(cls) -> SendResult:
        return cls(failure=SendFailure.CONTENT_TOO_LONG, detail=CONTENT_TOO_LONG_TEXT)

    @classmethod
    def unexpected(cls, exc: BaseException) -> SendResult:
        return cls(failure=SendFailure.UNEXPECTED, detail=UNEXPECTED_TEXT.format(error=exc))

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    def to_envelope(self) -> ResponseEnvelope:
        return ResponseEnvelope(success=self.succeeded, message=self.detail)
