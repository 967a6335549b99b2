"""Comment API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_comment_service, get_current_identity
from src.schemas.comment import (
    CommentCreateRequest,
    CommentData,
    CommentResponse,
    CommentsResponse,
)
from src.services.auth import Identity
from src.services.comment_service import CommentService

router = APIRouter(prefix="/api/articles/{slug}/comments", tags=["comments"])


@router.get("", response_model=CommentsResponse)
def list_comments(
    slug: str,
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Get all comments on an article."""
    return CommentsResponse(
        comments=[CommentData.from_comment(c) for c in comments.list_for_article(slug)]
    )


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    slug: str,
    payload: CommentCreateRequest,
    identity: Annotated[Identity, Depends(get_current_identity)],
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Add a comment to an article."""
    comment = comments.create(slug, identity.user_id, payload.comment)
    return CommentResponse(comment=CommentData.from_comment(comment))


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    slug: str,
    comment_id: int,
    identity: Annotated[Identity, Depends(get_current_identity)],
    comments: Annotated[CommentService, Depends(get_comment_service)],
):
    """Delete a comment (author only)."""
    comments.delete(slug, comment_id, identity.user_id)
