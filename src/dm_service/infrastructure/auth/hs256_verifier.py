from __future__ import annotations

import jwt

from dm_service.application.dto.principal import Principal
from dm_service.application.exceptions import CredentialExpired, UnauthorizedForResource
from dm_service.infrastructure.auth.claims import principal_from_claims


class HS256Verifier:
    """Verify JWTs signed with a shared HS256 secret."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    async def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise CredentialExpired("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise UnauthorizedForResource(f"Invalid token: {exc}") from exc
        return principal_from_claims(payload)
