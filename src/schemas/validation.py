"""Field checks shared by the request schemas.

Each check raises ``PydanticCustomError`` so pydantic collects every failing
field in one pass and the message reaches the client unprefixed.
"""

import re

from pydantic_core import PydanticCustomError

EMAIL_RE = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}$")
USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100
BIO_MAX_LENGTH = 500
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500
BODY_MAX_LENGTH = 10000


def fail(message: str) -> PydanticCustomError:
    return PydanticCustomError("value_error", message)


def is_valid_email(email: str) -> bool:
    return EMAIL_RE.match(email.lower()) is not None


def check_username(value: str, required: bool = True) -> str:
    if value == "":
        raise fail("username is required" if required else "username cannot be empty")
    if len(value) < USERNAME_MIN_LENGTH:
        raise fail(f"username must be at least {USERNAME_MIN_LENGTH} characters long")
    if len(value) > USERNAME_MAX_LENGTH:
        raise fail(f"username must be less than {USERNAME_MAX_LENGTH} characters long")
    if not USERNAME_RE.match(value):
        raise fail("username can only contain letters, numbers, and underscores")
    return value


def check_email(value: str, required: bool = True) -> str:
    if value == "":
        raise fail("email is required" if required else "email cannot be empty")
    if not is_valid_email(value):
        raise fail("email format is invalid")
    return value


def check_password(value: str, required: bool = True) -> str:
    if value == "":
        raise fail("password is required" if required else "password cannot be empty")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise fail(f"password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if len(value) > PASSWORD_MAX_LENGTH:
        raise fail(f"password must be less than {PASSWORD_MAX_LENGTH} characters long")
    return value


def check_text(value: str, field: str, max_length: int, required: bool = True) -> str:
    """Non-blank text with an upper length bound."""
    if value == "" and required:
        raise fail(f"{field} is required")
    if not value.strip():
        raise fail(f"{field} cannot be empty")
    if len(value) > max_length:
        raise fail(f"{field} must be less than {max_length} characters long")
    return value
