from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class ForbiddenError(AppError):
    pass


class AuthenticationError(AppError):
    """Raised before any messaging work starts; never folded into an envelope."""


class CredentialNotFound(AuthenticationError):
    pass


class CredentialExpired(AuthenticationError):
    pass


class UnauthorizedForResource(AuthenticationError):
    pass


class UnknownUser(AuthenticationError):
    pass
