"""Database and migration tests."""

from sqlalchemy import text

from src.database import create_db_engine
from src.migrator import applied_migrations, apply_migrations, migration_files, split_statements


def test_migrations_recorded_on_startup(app, client):
    names = applied_migrations(app.state.engine)
    assert names == [
        "001_create_users_table.sql",
        "002_create_articles_table.sql",
        "003_create_comments_table.sql",
    ]


def test_migrations_are_applied_once(app, client, settings):
    assert apply_migrations(app.state.engine, settings.migrations_dir) == []


def test_migrations_apply_to_fresh_database(settings):
    engine = create_db_engine(settings)
    try:
        applied = apply_migrations(engine, settings.migrations_dir)
        assert applied == migration_files(settings.migrations_dir)
        assert apply_migrations(engine, settings.migrations_dir) == []
    finally:
        engine.dispose()


def test_new_migration_file_is_picked_up(settings, tmp_path):
    migrations_dir = tmp_path / "migrations"
    migrations_dir.mkdir()
    (migrations_dir / "001_widgets.sql").write_text(
        "-- widgets\nCREATE TABLE widgets (id INTEGER PRIMARY KEY);\n"
    )
    engine = create_db_engine(settings)
    try:
        assert apply_migrations(engine, migrations_dir) == ["001_widgets.sql"]

        (migrations_dir / "002_gadgets.sql").write_text(
            "CREATE TABLE gadgets (id INTEGER PRIMARY KEY);"
        )
        assert apply_migrations(engine, migrations_dir) == ["002_gadgets.sql"]
        assert applied_migrations(engine) == ["001_widgets.sql", "002_gadgets.sql"]
    finally:
        engine.dispose()


def test_split_statements():
    script = """
    -- first table
    CREATE TABLE a (id INTEGER);
    CREATE INDEX idx_a ON a(id);

    -- trailing comment
    """
    assert split_statements(script) == ["CREATE TABLE a (id INTEGER)", "CREATE INDEX idx_a ON a(id)"]


def test_foreign_keys_enforced(session_factory):
    db = session_factory()
    try:
        assert db.execute(text("PRAGMA foreign_keys")).scalar() == 1
    finally:
        db.close()


def test_deleting_user_cascades(client, session_factory, auth_headers, create_article):
    create_article(auth_headers)
    client.post(
        "/api/articles/hello-world/comments",
        headers=auth_headers,
        json={"comment": {"body": "self reply"}},
    )

    db = session_factory()
    try:
        db.execute(text("DELETE FROM users WHERE username = 'alice'"))
        db.commit()
        assert db.execute(text("SELECT COUNT(*) FROM articles")).scalar() == 0
        assert db.execute(text("SELECT COUNT(*) FROM comments")).scalar() == 0
    finally:
        db.close()


def test_deleting_article_cascades(client, session_factory, auth_headers, create_article):
    create_article(auth_headers)
    client.post(
        "/api/articles/hello-world/comments",
        headers=auth_headers,
        json={"comment": {"body": "first"}},
    )

    db = session_factory()
    try:
        db.execute(text("DELETE FROM articles WHERE slug = 'hello-world'"))
        db.commit()
        assert db.execute(text("SELECT COUNT(*) FROM comments")).scalar() == 0
        assert db.execute(text("SELECT COUNT(*) FROM users")).scalar() == 1
    finally:
        db.close()
