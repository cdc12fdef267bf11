from __future__ import annotations

from dm_service.application.dto.message import MessageDraft
from dm_service.application.repositories.user import UserReader
from dm_service.domain.entities.user import User


def addressed_username(message: MessageDraft, receiver_hint: str | None) -> str | None:
    """The username a message is addressed to. An explicit hint wins over the payload."""
    if receiver_hint and receiver_hint.strip():
        return receiver_hint.strip()
    if message.receiver_username and message.receiver_username.strip():
        return message.receiver_username.strip()
    return None


class DirectoryReceiverResolver:
    """Resolve receivers by username against the user directory."""

    def __init__(self, users: UserReader) -> None:
        self._users = users

    async def resolve(self, message: MessageDraft, receiver_hint: str | None) -> User | None:
        username = addressed_username(message, receiver_hint)
        if username is None:
            return None
        return await self._users.get_by_username(username)
