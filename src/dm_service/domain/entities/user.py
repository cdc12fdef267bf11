from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class User:
    """A messaging party. Identity is ``id`` plus ``username``; display fields don't count."""

    id: int
    username: str
    full_name: str = field(default="", compare=False)
    company_name: str | None = field(default=None, compare=False)
