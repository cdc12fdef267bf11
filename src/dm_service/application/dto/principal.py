from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Principal:
    """Verified token claims, before the subject is matched to a stored user."""

    subject_id: int
    roles: list[str] = field(default_factory=list)
