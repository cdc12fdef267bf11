from __future__ import annotations

import asyncio
import logging

import jwt
from jwt import PyJWKClient, PyJWKClientConnectionError

from dm_service.application.dto.principal import Principal
from dm_service.application.exceptions import CredentialExpired, UnauthorizedForResource
from dm_service.infrastructure.auth.claims import principal_from_claims

logger = logging.getLogger(__name__)


class JWKSVerifier:
    """Verify JWTs using a remote JWKS endpoint."""

    def __init__(self, jwks_url: str, *, timeout: int = 5, retries: int = 2) -> None:
        self._jwks_url = jwks_url
        self._retries = retries
        self._jwk_client = PyJWKClient(jwks_url, timeout=timeout)

    def _signing_key(self, token: str):
        for attempt in range(self._retries + 1):
            try:
                return self._jwk_client.get_signing_key_from_jwt(token)
            except PyJWKClientConnectionError:
                if attempt == self._retries:
                    raise
                logger.warning(
                    "JWKS fetch from %s failed (attempt %d/%d), retrying",
                    self._jwks_url,
                    attempt + 1,
                    self._retries + 1,
                )

    async def verify(self, token: str) -> Principal:
        try:
            signing_key = await asyncio.to_thread(self._signing_key, token)
            payload = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256", "ES256"],
            )
        except jwt.ExpiredSignatureError as exc:
            raise CredentialExpired("Token has expired") from exc
        except PyJWKClientConnectionError:
            raise
        except jwt.PyJWTError as exc:
            raise UnauthorizedForResource(f"Invalid token: {exc}") from exc
        return principal_from_claims(payload)
