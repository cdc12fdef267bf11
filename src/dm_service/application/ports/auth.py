from __future__ import annotations

from typing import Protocol

from dm_service.application.dto.principal import Principal
from dm_service.domain.entities.user import User


class TokenVerifier(Protocol):
    async def verify(self, token: str) -> Principal: ...


class Authorizer(Protocol):
    async def authorize(self, credential: str | None, resource_path: str) -> User:
        """Return the calling user or raise an ``AuthenticationError`` subclass."""
        ...
