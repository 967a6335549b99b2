"""Authentication and user schemas."""

from pydantic import BaseModel, Field, field_validator

from src.models.user import User
from src.schemas.validation import (
    BIO_MAX_LENGTH,
    check_email,
    check_password,
    check_username,
    fail,
)


class UserRegister(BaseModel):
    """User registration request."""

    username: str = Field(default="", validate_default=True)
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return check_username(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password(value)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if value == "":
            raise fail("password is required")
        return value


class UserUpdate(BaseModel):
    """Update the current user.

    Absent (or null) fields are left unchanged; present fields are validated.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None
    bio: str | None = None
    image: str | None = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str | None) -> str | None:
        return None if value is None else check_username(value, required=False)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return None if value is None else check_email(value, required=False)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str | None) -> str | None:
        return None if value is None else check_password(value, required=False)

    @field_validator("bio")
    @classmethod
    def validate_bio(cls, value: str | None) -> str | None:
        if value is not None and len(value) > BIO_MAX_LENGTH:
            raise fail(f"bio must be less than {BIO_MAX_LENGTH} characters long")
        return value


class UserRegisterRequest(BaseModel):
    user: UserRegister


class UserLoginRequest(BaseModel):
    user: UserLogin


class UserUpdateRequest(BaseModel):
    user: UserUpdate


class UserData(BaseModel):
    """User information returned with a token."""

    username: str
    email: str
    bio: str
    image: str
    token: str

    @classmethod
    def from_user(cls, user: User, token: str) -> "UserData":
        return cls(
            username=user.username,
            email=user.email,
            bio=user.bio or "",
            image=user.image_url or "",
            token=token,
        )


class UserResponse(BaseModel):
    """Authentication response with token and user info."""

    user: UserData
