"""Pydantic schemas for API requests and responses."""

from src.schemas.article import (
    ArticleCreate,
    ArticleData,
    ArticleListQuery,
    ArticleResponse,
    ArticlesResponse,
    ArticleUpdate,
)
from src.schemas.auth import UserData, UserLogin, UserRegister, UserResponse, UserUpdate
from src.schemas.comment import CommentCreate, CommentData, CommentResponse, CommentsResponse
from src.schemas.profile import ProfileData, ProfileResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserData",
    "UserResponse",
    "ProfileData",
    "ProfileResponse",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleListQuery",
    "ArticleData",
    "ArticleResponse",
    "ArticlesResponse",
    "CommentCreate",
    "CommentData",
    "CommentResponse",
    "CommentsResponse",
]
