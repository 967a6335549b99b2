"""Forward-only SQL migrations.

Each ``*.sql`` file in the migrations directory is applied once, in filename
order, and recorded by name in ``schema_migrations``.
"""

import logging
from pathlib import Path

from sqlalchemy import Connection, Engine, text

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "schema_migrations"


def split_statements(script: str) -> list[str]:
    """Split a migration script into individual statements, dropping comments."""
    lines = [line for line in script.splitlines() if not line.strip().startswith("--")]
    statements = [stmt.strip() for stmt in "\n".join(lines).split(";")]
    return [stmt for stmt in statements if stmt]


def migration_files(directory: Path) -> list[str]:
    """Get sorted migration filenames."""
    return sorted(path.name for path in Path(directory).glob("*.sql") if path.is_file())


def _ensure_migrations_table(conn: Connection) -> None:
    conn.execute(
        text(
            f"""
            CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} (
                filename TEXT PRIMARY KEY,
                applied_at DATETIME DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
    )


def applied_migrations(engine: Engine) -> list[str]:
    """Get the filenames recorded in the migration log."""
    with engine.begin() as conn:
        _ensure_migrations_table(conn)
        rows = conn.execute(text(f"SELECT filename FROM {MIGRATIONS_TABLE} ORDER BY filename"))
        return [row[0] for row in rows]


def apply_migrations(engine: Engine, directory: Path) -> list[str]:
    """Apply pending migrations and return the filenames that were applied."""
    already_applied = set(applied_migrations(engine))
    newly_applied = []

    for filename in migration_files(directory):
        if filename in already_applied:
            continue

        script = (Path(directory) / filename).read_text(encoding="utf-8")
        with engine.begin() as conn:
            for statement in split_statements(script):
                conn.execute(text(statement))
            conn.execute(
                text(f"INSERT INTO {MIGRATIONS_TABLE} (filename) VALUES (:filename)"),
                {"filename": filename},
            )

        logger.info(f"Applied migration: {filename}")
        newly_applied.append(filename)

    if newly_applied:
        logger.info(f"Database migrations completed ({len(newly_applied)} applied)")
    return newly_applied
