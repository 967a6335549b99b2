"""Slug generation and uniqueness tests."""

import pytest

from src.services.slugs import (
    MAX_SUFFIX_ATTEMPTS,
    ensure_unique_slug,
    generate_slug,
    is_valid_slug,
)

TITLES = [
    "Hello, World!",
    "  Multiple   spaces   here  ",
    "a - b -- c",
    "--Leading and trailing--",
    "Tabs\tand\nnewlines",
    "snake_case_title",
    "Café résumé",
    "What's new in Python 3.13?",
    "x" * 150,
    "a" * 99 + " b",
    "UPPER lower 123",
    "!!!",
    "",
    "日本語のタイトル",
]


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello, World!", "hello-world"),
        ("  Multiple   spaces   here  ", "multiple-spaces-here"),
        ("a - b -- c", "a-b-c"),
        ("--Leading and trailing--", "leading-and-trailing"),
        ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ("snake_case_title", "snakecasetitle"),
        ("Café résumé", "caf-rsum"),
        ("UPPER lower 123", "upper-lower-123"),
    ],
)
def test_generate_slug(title, expected):
    assert generate_slug(title) == expected


@pytest.mark.parametrize("title", ["", "   ", "!!!", "日本語のタイトル"])
def test_generate_slug_empty(title):
    """Titles without ASCII letters or digits produce no slug."""
    assert generate_slug(title) == ""


def test_generate_slug_truncates_to_100():
    assert generate_slug("x" * 150) == "x" * 100


def test_generate_slug_trims_hyphen_left_by_truncation():
    slug = generate_slug("a" * 99 + " b")
    assert slug == "a" * 99


@pytest.mark.parametrize("title", TITLES)
def test_generated_slugs_have_valid_shape(title):
    slug = generate_slug(title)
    assert slug == slug.lower()
    assert len(slug) <= 100
    assert set(slug) <= set("abcdefghijklmnopqrstuvwxyz0123456789-")
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug
    if slug:
        assert is_valid_slug(slug)


def test_ensure_unique_slug_free_base():
    assert ensure_unique_slug("hello-world", []) == "hello-world"
    assert ensure_unique_slug("hello-world", ["hello-world-1"]) == "hello-world"


def test_ensure_unique_slug_appends_first_free_suffix():
    assert ensure_unique_slug("hello-world", ["hello-world"]) == "hello-world-1"
    assert (
        ensure_unique_slug("hello-world", ["hello-world", "hello-world-1", "hello-world-2"])
        == "hello-world-3"
    )


def test_ensure_unique_slug_fills_gaps():
    assert ensure_unique_slug("post", ["post", "post-2", "post-3"]) == "post-1"


def test_ensure_unique_slug_falls_back_to_timestamp():
    existing = ["post"] + [f"post-{n}" for n in range(1, MAX_SUFFIX_ATTEMPTS + 1)]
    assert ensure_unique_slug("post", existing, clock=lambda: 1700000000.5) == "post-1700000000"


def test_ensure_unique_slug_empty_base():
    assert ensure_unique_slug("", ["anything"]) == ""


@pytest.mark.parametrize(
    "existing",
    [
        [],
        ["a"],
        ["a", "a-1"],
        ["a-1", "a-2"],
        ["a", "a-1", "a-10", "a-b"],
        ["a"] + [f"a-{n}" for n in range(1, 50)],
    ],
)
def test_ensure_unique_slug_never_returns_existing(existing):
    assert ensure_unique_slug("a", existing) not in existing


@pytest.mark.parametrize(
    ("slug", "valid"),
    [
        ("hello-world", True),
        ("abc123", True),
        ("", False),
        ("-hello", False),
        ("hello-", False),
        ("hello--world", False),
        ("Hello", False),
        ("hello_world", False),
        ("a" * 101, False),
    ],
)
def test_is_valid_slug(slug, valid):
    assert is_valid_slug(slug) is valid
