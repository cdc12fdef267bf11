from __future__ import annotations

from dm_service.application.exceptions import CredentialNotFound, UnknownUser
from dm_service.application.policies.permissions import assert_resource_access
from dm_service.application.ports.auth import TokenVerifier
from dm_service.application.repositories.user import UserReader
from dm_service.domain.entities.user import User

BEARER_PREFIX = "bearer "


def extract_token(credential: str | None) -> str:
    """Accept either a raw token or an ``Authorization: Bearer <token>`` value."""
    token = (credential or "").strip()
    if token.lower().startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    if not token:
        raise CredentialNotFound("No credential supplied")
    return token


class TokenAuthorizer:
    """Turn a bearer credential into the stored user allowed to call a resource."""

    def __init__(self, verifier: TokenVerifier, users: UserReader) -> None:
        self._verifier = verifier
        self._users = users

    async def authorize(self, credential: str | None, resource_path: str) -> User:
        principal = await self._verifier.verify(extract_token(credential))
        assert_resource_access(principal, resource_path)
        user = await self._users.get_by_id(principal.subject_id)
        if user is None:
            raise UnknownUser(f"No user with id {principal.subject_id}")
        return user
