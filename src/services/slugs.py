"""Slug generation and uniqueness for article URLs."""

import re
import time
from collections.abc import Callable, Iterable

from src.models.article import SLUG_MAX_LENGTH

MAX_SUFFIX_ATTEMPTS = 1000

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9-]")
_HYPHENS_RE = re.compile(r"-+")
_VALID_SLUG_RE = re.compile(r"^[a-z0-9-]+$")


def generate_slug(title: str) -> str:
    """Derive a URL-safe slug from an article title.

    Returns an empty string when the title has no ASCII letters or digits;
    callers must reject that before persisting.
    """
    if not title:
        return ""

    slug = title.lower()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _DISALLOWED_RE.sub("", slug)
    slug = _HYPHENS_RE.sub("-", slug).strip("-")

    if len(slug) > SLUG_MAX_LENGTH:
        slug = slug[:SLUG_MAX_LENGTH].rstrip("-")

    return slug


def ensure_unique_slug(
    base_slug: str,
    existing_slugs: Iterable[str],
    clock: Callable[[], float] = time.time,
) -> str:
    """Return ``base_slug`` or the first free ``base_slug-N`` suffix.

    Gives up after MAX_SUFFIX_ATTEMPTS suffixes and falls back to the
    current Unix timestamp.
    """
    if not base_slug:
        return ""

    taken = set(existing_slugs)
    if base_slug not in taken:
        return base_slug

    for counter in range(1, MAX_SUFFIX_ATTEMPTS + 1):
        candidate = f"{base_slug}-{counter}"
        if candidate not in taken:
            return candidate

    return f"{base_slug}-{int(clock())}"


def is_valid_slug(slug: str) -> bool:
    """Check that a slug has the shape produced by generate_slug."""
    if not slug or len(slug) > SLUG_MAX_LENGTH:
        return False
    if not _VALID_SLUG_RE.match(slug):
        return False
    if slug.startswith("-") or slug.endswith("-"):
        return False
    return "--" not in slug
