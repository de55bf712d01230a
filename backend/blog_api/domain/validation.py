"""Field-rule validation for articles and comments.

Each validator is a pure function from proposed field values to the list of
violated-rule messages. Every rule is checked; an empty list means valid.
Message text is pluggable through ``ValidationMessages``; the defaults are the
Japanese display strings the public API has always returned.
"""

from dataclasses import dataclass
from datetime import datetime

from blog_api.domain.entities.article import ArticleStatus

TITLE_MAX_LENGTH = 100
AUTHOR_NAME_MAX_LENGTH = 50


@dataclass(frozen=True)
class ValidationMessages:
    """Per-rule display strings."""

    title_missing: str = "タイトルを入力してください"
    title_too_long: str = "タイトルは100文字以内で入力してください"
    body_missing: str = "本文を入力してください"
    status_missing: str = "ステータスを入力してください"
    status_invalid: str = "ステータスの値が不正です"
    status_locked: str = "アーカイブ済みの記事のステータスは変更できません"
    published_at_required: str = "公開日時は公開状態の場合必須です"
    author_name_missing: str = "投稿者名を入力してください"
    author_name_too_long: str = "投稿者名は1文字以上50文字以内で入力してください"
    comment_body_missing: str = "コメント本文を入力してください"


DEFAULT_MESSAGES = ValidationMessages()


@dataclass
class ArticleFields:
    """Proposed article state — what a create or merged update would persist."""

    title: str | None
    body: str | None
    status: ArticleStatus | str | None
    published_at: datetime | None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_article(
    fields: ArticleFields,
    messages: ValidationMessages = DEFAULT_MESSAGES,
) -> list[str]:
    errors: list[str] = []

    # len() counts codepoints, not bytes
    if _is_blank(fields.title):
        errors.append(messages.title_missing)
    elif len(fields.title) > TITLE_MAX_LENGTH:
        errors.append(messages.title_too_long)

    if _is_blank(fields.body):
        errors.append(messages.body_missing)

    if fields.status is None:
        errors.append(messages.status_missing)
    elif not isinstance(fields.status, ArticleStatus):
        errors.append(messages.status_invalid)
    elif fields.status is ArticleStatus.PUBLISHED and fields.published_at is None:
        errors.append(messages.published_at_required)

    return errors


def validate_comment(
    author_name: str | None,
    body: str | None,
    messages: ValidationMessages = DEFAULT_MESSAGES,
) -> list[str]:
    errors: list[str] = []

    if _is_blank(author_name):
        errors.append(messages.author_name_missing)
    elif len(author_name) > AUTHOR_NAME_MAX_LENGTH:
        errors.append(messages.author_name_too_long)

    if _is_blank(body):
        errors.append(messages.comment_body_missing)

    return errors
