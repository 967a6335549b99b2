"""Article schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.models.article import Article
from src.schemas.common import CamelModel
from src.schemas.profile import ProfileData
from src.schemas.validation import (
    BODY_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    check_text,
)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class ArticleCreate(BaseModel):
    """Create a new article."""

    title: str = Field(default="", validate_default=True)
    description: str = Field(default="", validate_default=True)
    body: str = Field(default="", validate_default=True)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return check_text(value, "title", TITLE_MAX_LENGTH)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        return check_text(value, "description", DESCRIPTION_MAX_LENGTH)

    @field_validator("body")
    @classmethod
    def validate_body(cls, value: str) -> str:
        return check_text(value, "body", BODY_MAX_LENGTH)


class ArticleUpdate(BaseModel):
    """Update an article. Absent fields are left unchanged."""

    title: str | None = None
    description: str | None = None
    body: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str | None) -> str | None:
        return None if value is None else check_text(value, "title", TITLE_MAX_LENGTH, False)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return check_text(value, "description", DESCRIPTION_MAX_LENGTH, False)

    @field_validator("body")
    @classmethod
    def validate_body(cls, value: str | None) -> str | None:
        return None if value is None else check_text(value, "body", BODY_MAX_LENGTH, False)


class ArticleCreateRequest(BaseModel):
    article: ArticleCreate


class ArticleUpdateRequest(BaseModel):
    article: ArticleUpdate


class ArticleListQuery(BaseModel):
    """Pagination and filtering for the article list.

    Out-of-range values are clamped rather than rejected.
    """

    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0
    author: str | None = None

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, value: int) -> int:
        if value <= 0:
            return DEFAULT_PAGE_SIZE
        return min(value, MAX_PAGE_SIZE)

    @field_validator("offset")
    @classmethod
    def clamp_offset(cls, value: int) -> int:
        return max(value, 0)


class ArticleData(CamelModel):
    """Article response."""

    id: int
    slug: str
    title: str
    description: str
    body: str
    created_at: datetime
    updated_at: datetime
    favorites_count: int
    favorited: bool = False
    author: ProfileData

    @classmethod
    def from_article(cls, article: Article) -> "ArticleData":
        return cls(
            id=article.id,
            slug=article.slug,
            title=article.title,
            description=article.description,
            body=article.body,
            created_at=article.created_at,
            updated_at=article.updated_at,
            favorites_count=article.favorites_count or 0,
            author=ProfileData.from_user(article.author),
        )


class ArticleResponse(CamelModel):
    article: ArticleData


class ArticlesResponse(CamelModel):
    articles: list[ArticleData]
    articles_count: int
