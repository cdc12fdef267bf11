from __future__ import annotations

from typing import Protocol

from dm_service.application.dto.message import MessageDraft
from dm_service.domain.entities.user import User


class ReceiverResolver(Protocol):
    async def resolve(self, message: MessageDraft, receiver_hint: str | None) -> User | None:
        """Return the addressed user, or None when nobody matches."""
        ...
