"""Comment operations scoped to an article."""

import logging

from sqlalchemy.orm import Session, joinedload

from src.exceptions import NotFoundError
from src.models.comment import Comment
from src.schemas.comment import CommentCreate
from src.services.article_service import ArticleService
from src.services.ownership import require_author

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comments on articles."""

    def __init__(self, db: Session):
        self.db = db
        self.articles = ArticleService(db)

    def list_for_article(self, slug: str) -> list[Comment]:
        """Get an article's comments, oldest first."""
        article = self.articles.get_by_slug(slug)
        return (
            self.db.query(Comment)
            .options(joinedload(Comment.author))
            .filter(Comment.article_id == article.id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )

    def create(self, slug: str, author_id: int, data: CommentCreate) -> Comment:
        article = self.articles.get_by_slug(slug)
        comment = Comment(body=data.body, author_id=author_id, article_id=article.id)
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def delete(self, slug: str, comment_id: int, user_id: int) -> None:
        """Delete a comment written by ``user_id`` on the given article."""
        article = self.articles.get_by_slug(slug)
        comment = (
            self.db.query(Comment)
            .filter(Comment.id == comment_id, Comment.article_id == article.id)
            .first()
        )
        require_author(comment, user_id, "Comment", "delete")

        self.db.delete(comment)
        self.db.commit()
        logger.info(f"User {user_id} deleted comment {comment_id} on '{slug}'")
