"""Article CRUD and lifecycle endpoints.

Reads are public; every mutation needs a bearer token and, for an existing
article, ownership. Domain exceptions are rendered by the handlers in
``blog_api.presentation.api.error_handlers``.
"""

from fastapi import APIRouter, Depends, status

from blog_api.application.schemas import (
    ArticleCreateRequest,
    ArticleResponse,
    ArticleTransitionResponse,
    ArticleUpdateRequest,
)
from blog_api.application.services import ArticleService
from blog_api.domain.entities import Article
from blog_api.infrastructure.dependencies import RecordId, get_article_service, get_current_user_id

router = APIRouter(prefix="/articles", tags=["Articles"])


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Published articles, most recently published first."""
    articles = await service.list_published_articles()
    return [_to_response(a) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: RecordId,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID, whatever its status."""
    article = await service.get_article(article_id)
    return _to_response(article)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreateRequest,
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create an article owned by the caller."""
    article = await service.create_article(data.article, owner_id=user_id)
    return _to_response(article)


@router.api_route("/{article_id}", methods=["PATCH", "PUT"], response_model=ArticleResponse)
async def update_article(
    article_id: RecordId,
    data: ArticleUpdateRequest,
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update the fields sent in the request body."""
    article = await service.update_article(article_id, data.article, acting_user_id=user_id)
    return _to_response(article)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: RecordId,
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article and its comments."""
    await service.delete_article(article_id, acting_user_id=user_id)


@router.post("/{article_id}/publish", response_model=ArticleTransitionResponse)
async def publish_article(
    article_id: RecordId,
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleTransitionResponse:
    article, changed = await service.publish_article(article_id, acting_user_id=user_id)
    return ArticleTransitionResponse(article=_to_response(article), changed=changed)


@router.post("/{article_id}/unpublish", response_model=ArticleTransitionResponse)
async def unpublish_article(
    article_id: RecordId,
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleTransitionResponse:
    article, changed = await service.unpublish_article(article_id, acting_user_id=user_id)
    return ArticleTransitionResponse(article=_to_response(article), changed=changed)


@router.post("/{article_id}/archive", response_model=ArticleTransitionResponse)
async def archive_article(
    article_id: RecordId,
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleTransitionResponse:
    article, changed = await service.archive_article(article_id, acting_user_id=user_id)
    return ArticleTransitionResponse(article=_to_response(article), changed=changed)
