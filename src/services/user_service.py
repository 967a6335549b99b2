"""User registration, login and profile updates."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError, NotFoundError
from src.models.user import User
from src.schemas.auth import UserRegister, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user accounts."""

    def __init__(self, db: Session, pwd_context: CryptContext):
        self.db = db
        self.pwd_context = pwd_context

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def get_profile(self, username: str) -> User:
        user = self.get_by_username(username)
        if user is None:
            raise NotFoundError("Profile")
        return user

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def username_exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def register(self, data: UserRegister) -> User:
        """Create a new user.

        Duplicate email or username is reported as a 400 conflict.
        """
        if self.email_exists(data.email):
            raise ConflictError("User with this email already exists", http_status=400)
        if self.username_exists(data.username):
            raise ConflictError("User with this username already exists", http_status=400)

        user = User(
            username=data.username,
            email=data.email,
            password_hash=self.pwd_context.hash(data.password),
        )
        self.db.add(user)
        self._commit("User with this email or username already exists")
        self.db.refresh(user)

        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password."""
        user = self.get_by_email(email)
        if not user:
            return None
        if not self.pwd_context.verify(password, user.password_hash):
            return None
        return user

    def update(self, user: User, data: UserUpdate) -> User:
        """Apply the fields present in ``data`` to ``user``."""
        if data.email is not None and data.email != user.email and self.email_exists(data.email):
            raise ConflictError("Email already exists", http_status=400)
        if (
            data.username is not None
            and data.username != user.username
            and self.username_exists(data.username)
        ):
            raise ConflictError("Username already exists", http_status=400)

        if data.username is not None:
            user.username = data.username
        if data.email is not None:
            user.email = data.email
        if data.bio is not None:
            user.bio = data.bio
        if data.image is not None:
            user.image_url = data.image
        if data.password is not None:
            user.password_hash = self.pwd_context.hash(data.password)

        self._commit("Username or email already exists")
        self.db.refresh(user)
        return user

    def _commit(self, conflict_message: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Unique constraint violated: {e.orig}")
            raise ConflictError(conflict_message, http_status=400) from e
