"""Application service (use case) for comments on an article."""

import logging

from blog_api.application.interfaces import ArticleRepository, CommentRepository
from blog_api.application.schemas import CommentCreate
from blog_api.domain.entities import Comment
from blog_api.domain.exceptions import EntityNotFoundError, ValidationError
from blog_api.domain.validation import DEFAULT_MESSAGES, ValidationMessages, validate_comment

logger = logging.getLogger(__name__)


class CommentService:
    """Comment operations, always scoped to an existing article."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        messages: ValidationMessages = DEFAULT_MESSAGES,
    ):
        self._comments = comment_repository
        self._articles = article_repository
        self._messages = messages

    async def list_comments(self, article_id: int) -> list[Comment]:
        await self._require_article(article_id)
        return await self._comments.list_for_article(article_id)

    async def create_comment(self, article_id: int, data: CommentCreate) -> Comment:
        await self._require_article(article_id)

        errors = validate_comment(data.author_name, data.body, self._messages)
        if errors:
            raise ValidationError(errors)

        comment = Comment(article_id=article_id, author_name=data.author_name, body=data.body)
        created = await self._comments.create(comment)
        logger.info("Comment %s added to article %s", created.id, article_id)
        return created

    async def delete_comment(self, article_id: int, comment_id: int) -> bool:
        """Delete a comment. A comment under a different article counts as not found."""
        await self._require_article(article_id)
        comment = await self._comments.get_for_article(article_id, comment_id)
        if comment is None:
            raise EntityNotFoundError("Comment", comment_id)
        return await self._comments.delete(comment_id)

    async def _require_article(self, article_id: int) -> None:
        if await self._articles.get_by_id(article_id) is None:
            raise EntityNotFoundError("Article", article_id)
