"""Domain entity for comments attached to an article."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Comment:
    """A reader comment. Belongs to exactly one article; never updated."""

    article_id: int
    author_name: str
    body: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
