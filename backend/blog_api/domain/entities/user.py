"""Domain entity for the users that own articles."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """An account that can be named as the subject of a bearer token."""

    email: str
    name: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
