"""Author-only mutation checks shared by articles and comments."""

from typing import Protocol, TypeVar

from src.exceptions import ForbiddenError, NotFoundError


class Authored(Protocol):
    author_id: int


T = TypeVar("T", bound=Authored)


def require_author(resource: T | None, user_id: int, resource_name: str, action: str) -> T:
    """Return the resource if ``user_id`` wrote it.

    Raises NotFoundError when the resource is missing and ForbiddenError when
    someone else wrote it.
    """
    if resource is None:
        raise NotFoundError(resource_name)
    if resource.author_id != user_id:
        raise ForbiddenError(f"You can only {action} your own {resource_name.lower()}s")
    return resource
