"""Comment endpoints, nested under their article."""

from fastapi import APIRouter, Depends, status

from blog_api.application.schemas import CommentCreateRequest, CommentResponse
from blog_api.application.services import CommentService
from blog_api.infrastructure.dependencies import (
    RecordId,
    get_comment_delete_actor,
    get_comment_service,
)

router = APIRouter(prefix="/articles/{article_id}/comments", tags=["Comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    article_id: RecordId,
    service: CommentService = Depends(get_comment_service),
) -> list[CommentResponse]:
    """Comments of one article, newest first."""
    comments = await service.list_comments(article_id)
    return [CommentResponse.model_validate(c, from_attributes=True) for c in comments]


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    article_id: RecordId,
    data: CommentCreateRequest,
    service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    comment = await service.create_comment(article_id, data.comment)
    return CommentResponse.model_validate(comment, from_attributes=True)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    article_id: RecordId,
    comment_id: RecordId,
    _actor: int | None = Depends(get_comment_delete_actor),
    service: CommentService = Depends(get_comment_service),
) -> None:
    await service.delete_comment(article_id, comment_id)
