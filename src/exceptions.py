"""Application error hierarchy.

Every error carries an ``ErrorKind`` and the HTTP status it maps to. Services
raise these; the handlers in ``src.api.error_handlers`` turn them into JSON
responses without looking at the message text.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failure that the API distinguishes."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ConduitError(Exception):
    """Base exception for all Conduit errors."""

    kind = ErrorKind.INTERNAL
    http_status = 500

    def __init__(self, message: str = "Internal server error", http_status: int | None = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(ConduitError):
    """One or more request fields failed validation."""

    kind = ErrorKind.VALIDATION
    http_status = 400

    def __init__(self, errors: list[FieldError]):
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": [error.to_dict() for error in self.errors]}


class EmptySlugError(ValidationError):
    """The title produced no usable slug characters."""

    def __init__(self):
        super().__init__(
            [FieldError("title", "title must contain at least one letter or digit")]
        )


class UnauthorizedError(ConduitError):
    """Missing or unusable credentials."""

    kind = ErrorKind.UNAUTHORIZED
    http_status = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class TokenExpiredError(UnauthorizedError):
    """The token was valid but its expiry has passed."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class TokenInvalidError(UnauthorizedError):
    """Bad signature, malformed token, wrong algorithm or missing claims."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ForbiddenError(ConduitError):
    """Authenticated, but not allowed to touch this resource."""

    kind = ErrorKind.FORBIDDEN
    http_status = 403


class NotFoundError(ConduitError):
    """The requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND
    http_status = 404

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")
        self.resource = resource


class ConflictError(ConduitError):
    """A unique key (email, username, slug) is already taken."""

    kind = ErrorKind.CONFLICT
    http_status = 409
