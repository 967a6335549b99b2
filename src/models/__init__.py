"""SQLAlchemy models."""

from src.models.article import Article
from src.models.comment import Comment
from src.models.user import User

__all__ = [
    "User",
    "Article",
    "Comment",
]
