"""Article entity and its publication lifecycle — no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ArticleStatus(str, Enum):
    """Lifecycle states of an article."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


def coerce_status(value: "ArticleStatus | str | None") -> "ArticleStatus | str | None":
    """Map a raw status value onto the enum, leaving unknown values untouched.

    Unknown strings are kept as-is so the validation pipeline can report them.
    """
    if value is None or isinstance(value, ArticleStatus):
        return value
    try:
        return ArticleStatus(value)
    except ValueError:
        return value


@dataclass
class Article:
    """A blog article owned by the user who created it.

    Invariant: ``status == PUBLISHED`` implies ``published_at is not None``.
    The named transitions below preserve it; generic writes go through
    ``normalize_publication`` and the validation pipeline.
    """

    title: str
    body: str
    user_id: int
    status: ArticleStatus = ArticleStatus.DRAFT
    published_at: datetime | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_published(self) -> bool:
        return self.status is ArticleStatus.PUBLISHED

    @property
    def is_archived(self) -> bool:
        return self.status is ArticleStatus.ARCHIVED

    def publish(self, now: datetime) -> bool:
        """Move to PUBLISHED, stamping ``published_at`` with ``now``.

        Returns False without touching anything if already published.
        """
        if self.is_published:
            return False
        self.status = ArticleStatus.PUBLISHED
        self.published_at = now
        self.updated_at = now
        return True

    def unpublish(self, now: datetime) -> bool:
        """Move a published article back to DRAFT; ``published_at`` is kept."""
        if not self.is_published:
            return False
        self.status = ArticleStatus.DRAFT
        self.updated_at = now
        return True

    def archive(self, now: datetime) -> bool:
        """Move to ARCHIVED from any other state; ``published_at`` is kept."""
        if self.is_archived:
            return False
        self.status = ArticleStatus.ARCHIVED
        self.updated_at = now
        return True


def normalize_publication(
    status: "ArticleStatus | str | None",
    published_at: datetime | None,
    previous_status: ArticleStatus | None,
    now: datetime,
) -> datetime | None:
    """Pre-persist step: return the ``published_at`` value to store.

    A write that changes the status to PUBLISHED with no ``published_at``
    gets ``now``. A write that keeps the status PUBLISHED is left alone, so an
    explicitly cleared value still fails validation.
    """
    if (
        status is ArticleStatus.PUBLISHED
        and previous_status is not ArticleStatus.PUBLISHED
        and published_at is None
    ):
        return now
    return published_at
