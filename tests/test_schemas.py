"""Request schema validation tests."""

import pytest
from pydantic import ValidationError

from src.schemas.article import ArticleCreate, ArticleListQuery, ArticleUpdate
from src.schemas.auth import UserLogin, UserRegister, UserUpdate
from src.schemas.comment import CommentCreate


def errors_by_field(exc_info) -> dict[str, str]:
    return {str(e["loc"][-1]): e["msg"] for e in exc_info.value.errors()}


def test_valid_registration():
    user = UserRegister(username="alice_1", email="Alice@Example.com", password="secret1")
    assert user.username == "alice_1"


def test_registration_collects_all_errors():
    with pytest.raises(ValidationError) as exc_info:
        UserRegister(username="al", email="not-an-email", password="secret1")

    assert errors_by_field(exc_info) == {
        "username": "username must be at least 3 characters long",
        "email": "email format is invalid",
    }


def test_registration_required_fields():
    with pytest.raises(ValidationError) as exc_info:
        UserRegister()

    assert errors_by_field(exc_info) == {
        "username": "username is required",
        "email": "email is required",
        "password": "password is required",
    }


@pytest.mark.parametrize(
    ("username", "message"),
    [
        ("a" * 51, "username must be less than 50 characters long"),
        ("bad name", "username can only contain letters, numbers, and underscores"),
        ("dash-ed", "username can only contain letters, numbers, and underscores"),
    ],
)
def test_registration_username_rules(username, message):
    with pytest.raises(ValidationError) as exc_info:
        UserRegister(username=username, email="a@x.com", password="secret1")
    assert errors_by_field(exc_info) == {"username": message}


@pytest.mark.parametrize(
    ("password", "message"),
    [
        ("12345", "password must be at least 6 characters long"),
        ("x" * 101, "password must be less than 100 characters long"),
    ],
)
def test_registration_password_rules(password, message):
    with pytest.raises(ValidationError) as exc_info:
        UserRegister(username="alice", email="a@x.com", password=password)
    assert errors_by_field(exc_info) == {"password": message}


def test_login_requires_email_and_password():
    with pytest.raises(ValidationError) as exc_info:
        UserLogin(email="", password="")
    assert errors_by_field(exc_info) == {
        "email": "email is required",
        "password": "password is required",
    }


def test_login_does_not_check_password_length():
    assert UserLogin(email="a@x.com", password="x").password == "x"


def test_user_update_absent_fields_are_unset():
    update = UserUpdate()
    assert update.model_fields_set == set()
    assert update.username is None


def test_user_update_null_means_unchanged():
    update = UserUpdate(username=None, bio=None)
    assert update.username is None
    assert update.bio is None


def test_user_update_validates_present_fields():
    with pytest.raises(ValidationError) as exc_info:
        UserUpdate(username="", email="nope", password="123", bio="b" * 501)

    assert errors_by_field(exc_info) == {
        "username": "username cannot be empty",
        "email": "email format is invalid",
        "password": "password must be at least 6 characters long",
        "bio": "bio must be less than 500 characters long",
    }


def test_user_update_allows_clearing_bio_and_image():
    update = UserUpdate(bio="", image="")
    assert update.bio == ""
    assert update.image == ""


def test_article_create_required_fields():
    with pytest.raises(ValidationError) as exc_info:
        ArticleCreate()
    assert errors_by_field(exc_info) == {
        "title": "title is required",
        "description": "description is required",
        "body": "body is required",
    }


def test_article_create_blank_and_too_long():
    with pytest.raises(ValidationError) as exc_info:
        ArticleCreate(title="   ", description="d" * 501, body="b" * 10001)
    assert errors_by_field(exc_info) == {
        "title": "title cannot be empty",
        "description": "description must be less than 500 characters long",
        "body": "body must be less than 10000 characters long",
    }


def test_article_create_length_limits_are_inclusive():
    article = ArticleCreate(title="t" * 200, description="d" * 500, body="b" * 10000)
    assert len(article.body) == 10000


def test_article_update_only_validates_present_fields():
    update = ArticleUpdate(body="new body")
    assert update.title is None
    assert update.body == "new body"

    with pytest.raises(ValidationError) as exc_info:
        ArticleUpdate(title="")
    assert errors_by_field(exc_info) == {"title": "title cannot be empty"}


def test_comment_create():
    assert CommentCreate(body="Nice post").body == "Nice post"
    with pytest.raises(ValidationError) as exc_info:
        CommentCreate(body="  ")
    assert errors_by_field(exc_info) == {"body": "body cannot be empty"}


@pytest.mark.parametrize(
    ("limit", "offset", "expected_limit", "expected_offset"),
    [
        (20, 0, 20, 0),
        (0, 0, 20, 0),
        (-3, -5, 20, 0),
        (100, 10, 100, 10),
        (1000, 0, 100, 0),
    ],
)
def test_article_list_query_clamps(limit, offset, expected_limit, expected_offset):
    query = ArticleListQuery(limit=limit, offset=offset)
    assert query.limit == expected_limit
    assert query.offset == expected_offset
