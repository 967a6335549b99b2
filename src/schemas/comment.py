"""Comment schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.models.comment import Comment
from src.schemas.common import CamelModel
from src.schemas.profile import ProfileData
from src.schemas.validation import BODY_MAX_LENGTH, check_text


class CommentCreate(BaseModel):
    """Create a comment on an article."""

    body: str = Field(default="", validate_default=True)

    @field_validator("body")
    @classmethod
    def validate_body(cls, value: str) -> str:
        return check_text(value, "body", BODY_MAX_LENGTH)


class CommentCreateRequest(BaseModel):
    comment: CommentCreate


class CommentData(CamelModel):
    """Comment response."""

    id: int
    body: str
    created_at: datetime
    updated_at: datetime
    author: ProfileData

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentData":
        return cls(
            id=comment.id,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=ProfileData.from_user(comment.author),
        )


class CommentResponse(CamelModel):
    comment: CommentData


class CommentsResponse(CamelModel):
    comments: list[CommentData]
