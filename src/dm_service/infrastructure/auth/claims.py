from __future__ import annotations

from typing import Any

from dm_service.application.dto.principal import Principal
from dm_service.application.exceptions import UnknownUser


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    try:
        subject_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise UnknownUser("Token has no usable subject") from exc
    roles = payload.get("roles") or []
    return Principal(subject_id=subject_id, roles=list(roles))
