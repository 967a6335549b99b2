"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import UnauthorizedError
from src.models.user import User
from src.services.article_service import ArticleService
from src.services.auth import Identity, TokenService
from src.services.comment_service import CommentService
from src.services.user_service import UserService

TOKEN_PREFIX = "Token "

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_context(request: Request) -> CryptContext:
    return request.app.state.pwd_context


def extract_token(authorization: str | None) -> str:
    """Pull the token out of an ``Authorization: Token <jwt>`` header."""
    if not authorization:
        raise UnauthorizedError("Missing authorization header")
    if not authorization.startswith(TOKEN_PREFIX):
        raise UnauthorizedError("Invalid authorization header format")
    token = authorization[len(TOKEN_PREFIX) :].strip()
    if not token:
        raise UnauthorizedError("Missing token")
    return token


def get_current_identity(
    authorization: Annotated[str | None, Depends(authorization_header)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Verify the request's token and return who is calling."""
    return token_service.identify(extract_token(authorization))


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    pwd_context: Annotated[CryptContext, Depends(get_password_context)],
) -> UserService:
    return UserService(db, pwd_context)


def get_current_user(
    identity: Annotated[Identity, Depends(get_current_identity)],
    users: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Get the current authenticated user from the JWT token."""
    user = users.get_by_id(identity.user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user


def get_article_service(
    db: Annotated[Session, Depends(get_db)],
) -> ArticleService:
    return ArticleService(db)


def get_comment_service(
    db: Annotated[Session, Depends(get_db)],
) -> CommentService:
    return CommentService(db)
