"""Article API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_article_service, get_current_identity
from src.schemas.article import (
    DEFAULT_PAGE_SIZE,
    ArticleCreateRequest,
    ArticleData,
    ArticleListQuery,
    ArticleResponse,
    ArticlesResponse,
    ArticleUpdateRequest,
)
from src.services.article_service import ArticleService
from src.services.auth import Identity

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=ArticlesResponse)
def list_articles(
    articles: Annotated[ArticleService, Depends(get_article_service)],
    limit: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
    author: str | None = None,
):
    """List articles, newest first."""
    query = ArticleListQuery(limit=limit, offset=offset, author=author or None)
    page, total = articles.list_articles(query)
    return ArticlesResponse(
        articles=[ArticleData.from_article(article) for article in page],
        articles_count=total,
    )


@router.get("/{slug}", response_model=ArticleResponse)
def get_article(
    slug: str,
    articles: Annotated[ArticleService, Depends(get_article_service)],
):
    """Get a single article by slug."""
    return ArticleResponse(article=ArticleData.from_article(articles.get_by_slug(slug)))


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
def create_article(
    payload: ArticleCreateRequest,
    identity: Annotated[Identity, Depends(get_current_identity)],
    articles: Annotated[ArticleService, Depends(get_article_service)],
):
    """Create a new article."""
    article = articles.create(identity.user_id, payload.article)
    return ArticleResponse(article=ArticleData.from_article(article))


@router.put("/{slug}", response_model=ArticleResponse)
def update_article(
    slug: str,
    payload: ArticleUpdateRequest,
    identity: Annotated[Identity, Depends(get_current_identity)],
    articles: Annotated[ArticleService, Depends(get_article_service)],
):
    """Update an article (author only)."""
    article = articles.update(slug, identity.user_id, payload.article)
    return ArticleResponse(article=ArticleData.from_article(article))


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
def delete_article(
    slug: str,
    identity: Annotated[Identity, Depends(get_current_identity)],
    articles: Annotated[ArticleService, Depends(get_article_service)],
):
    """Delete an article (author only)."""
    articles.delete(slug, identity.user_id)
