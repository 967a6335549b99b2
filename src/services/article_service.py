"""Article persistence with slug assignment and author-only mutation."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from src.exceptions import ConflictError, EmptySlugError, NotFoundError
from src.models.article import Article
from src.models.user import User
from src.schemas.article import ArticleCreate, ArticleListQuery, ArticleUpdate
from src.services.ownership import require_author
from src.services.slugs import ensure_unique_slug, generate_slug

logger = logging.getLogger(__name__)

SLUG_CONFLICT_MESSAGE = "Article with this title already exists"


class ArticleService:
    """Service for article operations."""

    def __init__(self, db: Session):
        self.db = db

    def existing_slugs(self, base_slug: str, exclude_id: int | None = None) -> list[str]:
        """Get slugs that start with ``base_slug``, optionally skipping one article."""
        query = self.db.query(Article.slug).filter(
            Article.slug.startswith(base_slug, autoescape=True)
        )
        if exclude_id is not None:
            query = query.filter(Article.id != exclude_id)
        return [slug for (slug,) in query.order_by(Article.slug).all()]

    def unique_slug_for(self, title: str, exclude_id: int | None = None) -> str:
        """Generate a slug for ``title`` that no other article uses."""
        base_slug = generate_slug(title)
        if not base_slug:
            raise EmptySlugError()
        return ensure_unique_slug(base_slug, self.existing_slugs(base_slug, exclude_id))

    def get_by_slug(self, slug: str) -> Article:
        article = (
            self.db.query(Article)
            .options(joinedload(Article.author))
            .filter(Article.slug == slug)
            .first()
        )
        if article is None:
            raise NotFoundError("Article")
        return article

    def list_articles(self, query: ArticleListQuery) -> tuple[list[Article], int]:
        """Get a page of articles, newest first, with the total count."""
        base = self.db.query(Article).join(User, Article.author_id == User.id)
        if query.author:
            base = base.filter(User.username == query.author)

        total = base.with_entities(func.count(Article.id)).scalar() or 0
        articles = (
            base.options(joinedload(Article.author))
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(query.limit)
            .offset(query.offset)
            .all()
        )
        return articles, total

    def create(self, author_id: int, data: ArticleCreate) -> Article:
        article = Article(
            slug=self.unique_slug_for(data.title),
            title=data.title,
            description=data.description,
            body=data.body,
            author_id=author_id,
        )
        self.db.add(article)
        self._commit()
        self.db.refresh(article)

        logger.info(f"User {author_id} created article '{article.slug}'")
        return article

    def update(self, slug: str, user_id: int, data: ArticleUpdate) -> Article:
        """Update an article owned by ``user_id``.

        A new title regenerates the slug; the article's own slug does not
        count as a collision.
        """
        article = require_author(self._find(slug), user_id, "Article", "update")

        if data.title is not None:
            article.slug = self.unique_slug_for(data.title, exclude_id=article.id)
            article.title = data.title
        if data.description is not None:
            article.description = data.description
        if data.body is not None:
            article.body = data.body

        self._commit()
        self.db.refresh(article)
        return article

    def delete(self, slug: str, user_id: int) -> None:
        article = require_author(self._find(slug), user_id, "Article", "delete")
        self.db.delete(article)
        self.db.commit()
        logger.info(f"User {user_id} deleted article '{slug}'")

    def _find(self, slug: str) -> Article | None:
        return self.db.query(Article).filter(Article.slug == slug).first()

    def _commit(self) -> None:
        # The unique index on slug turns a lost race into a conflict
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Slug collision on commit: {e.orig}")
            raise ConflictError(SLUG_CONFLICT_MESSAGE) from e
