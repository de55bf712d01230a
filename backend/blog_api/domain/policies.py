"""Authorization rules for article mutation."""

from blog_api.domain.entities import Article


def can_mutate(article: Article, acting_user_id: int) -> bool:
    """Only the user recorded as owner at creation may change or delete an article."""
    return article.user_id == acting_user_id
