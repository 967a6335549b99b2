"""Article model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin

SLUG_MAX_LENGTH = 100


class Article(Base, TimestampMixin):
    """Article model, addressed publicly by its slug."""

    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(String(500), nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    favorites_count = Column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    author = relationship("User", back_populates="articles")
    comments = relationship(
        "Comment", back_populates="article", cascade="all, delete-orphan", passive_deletes=True
    )
