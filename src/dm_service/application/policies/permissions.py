from __future__ import annotations

from dm_service.application.dto.principal import Principal
from dm_service.application.exceptions import (
    ForbiddenError,
    NotFoundError,
    UnauthorizedForResource,
)
from dm_service.domain.entities.message import MessageRecord
from dm_service.domain.entities.user import User

DEFAULT_ROLE = "user"

# Roles a token must carry to call each resource.
RESOURCE_ROLES: dict[str, frozenset[str]] = {
    "/api/messages/create": frozenset({"user", "admin"}),
    "/api/messages/inbox": frozenset({"user", "admin"}),
    "/api/messages/outbox": frozenset({"user", "admin"}),
    "/api/messages/view": frozenset({"user", "admin"}),
    "/api/messages/read": frozenset({"user", "admin"}),
    "/api/messages/archive": frozenset({"user", "admin"}),
}


def assert_resource_access(principal: Principal, resource_path: str) -> None:
    allowed = RESOURCE_ROLES.get(resource_path)
    roles = set(principal.roles) or {DEFAULT_ROLE}
    if allowed is None or not roles & allowed:
        raise UnauthorizedForResource(f"Not authorized for {resource_path}")


def assert_message_access(message: MessageRecord | None, user: User) -> MessageRecord:
    """Raise if the message doesn't exist or ``user`` is not one of its two parties."""
    if message is None:
        raise NotFoundError("Message not found")
    if not message.is_participant(user):
        raise ForbiddenError("Not a participant of this message")
    return message
