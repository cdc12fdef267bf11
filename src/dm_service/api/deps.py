"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, Header

from dm_service.application.ports.auth import Authorizer, TokenVerifier
from dm_service.application.ports.resolver import ReceiverResolver
from dm_service.config import settings
from dm_service.infrastructure.auth.authorizer import TokenAuthorizer
from dm_service.infrastructure.auth.hs256_verifier import HS256Verifier
from dm_service.infrastructure.auth.jwks_verifier import JWKSVerifier
from dm_service.infrastructure.db.session import AsyncSessionLocal
from dm_service.infrastructure.db.uow import SqlAlchemyUoW
from dm_service.services.receiver_resolver import DirectoryReceiverResolver


async def get_uow() -> AsyncIterator[SqlAlchemyUoW]:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        try:
            yield uow
        finally:
            await session.close()


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def _get_verifier() -> TokenVerifier:
    if settings.JWT_VERIFY_MODE == "jwks":
        assert settings.JWKS_URL, "JWKS_URL must be set when JWT_VERIFY_MODE=jwks"
        return JWKSVerifier(
            settings.JWKS_URL,
            timeout=settings.JWKS_TIMEOUT_SECONDS,
            retries=settings.JWKS_RETRY_COUNT,
        )
    return HS256Verifier(settings.JWT_SECRET, settings.JWT_ALGORITHM)


_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = _get_verifier()
    return _verifier


def get_authorizer(uow: UoWDep) -> Authorizer:
    return TokenAuthorizer(get_verifier(), uow.users)


AuthorizerDep = Annotated[Authorizer, Depends(get_authorizer)]


def get_resolver(uow: UoWDep) -> ReceiverResolver:
    return DirectoryReceiverResolver(uow.users)


ResolverDep = Annotated[ReceiverResolver, Depends(get_resolver)]

Credential = Annotated[str | None, Header(alias="Authorization")]
