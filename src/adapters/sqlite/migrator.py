"""
Schema migrations for the SQLite store.

Files ending in .sql are applied in filename order. The up section of a
file (everything before an optional "-- Down" marker) and its `_migrations`
record are written in one transaction: a failing file leaves neither partial
schema nor a record behind.
"""

import logging
import os
import sqlite3
from pathlib import Path

from src.domain.errors import MigrationFailed

logger = logging.getLogger(__name__)

DEFAULT_MIGRATIONS_DIR = str(Path(__file__).resolve().parents[3] / "migrations")
DOWN_MARKER = "-- Down"


def split_statements(script: str) -> list[str]:
    """Split a script into complete statements; comment-only lines are dropped."""
    statements: list[str] = []
    buffer = ""
    for line in script.splitlines():
        stripped = line.strip()
        if not buffer and (not stripped or stripped.startswith("--")):
            continue
        buffer += line + "\n"
        if sqlite3.complete_statement(buffer):
            statements.append(buffer.strip())
            buffer = ""
    if buffer.strip():
        # Unterminated trailing statement; let SQLite report it.
        statements.append(buffer.strip())
    return statements


class SQLiteMigrator:
    def __init__(self, db_path: str, migrations_dir: str = DEFAULT_MIGRATIONS_DIR):
        self.db_path = db_path
        self.migrations_dir = migrations_dir

    def _get_connection(self) -> sqlite3.Connection:
        # Autocommit; each migration opens its own transaction.
        try:
            conn = sqlite3.connect(self.db_path, isolation_level=None)
            conn.execute("PRAGMA foreign_keys = ON;")
        except sqlite3.Error as e:
            raise MigrationFailed(f"Cannot open {self.db_path}: {e}") from e
        return conn

    def _ensure_migration_table(self, conn: sqlite3.Connection) -> None:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS _migrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                filename TEXT UNIQUE NOT NULL,
                applied_at DATETIME DEFAULT CURRENT_TIMESTAMP
            );
        """)

    def _get_applied_migrations(self, conn: sqlite3.Connection) -> set[str]:
        found = conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = '_migrations'"
        ).fetchone()
        if found is None:
            return set()
        cursor = conn.execute("SELECT filename FROM _migrations")
        return {row[0] for row in cursor.fetchall()}

    def available(self) -> list[str]:
        return sorted(f for f in os.listdir(self.migrations_dir) if f.endswith(".sql"))

    def pending(self) -> list[str]:
        """Filenames not yet applied. A missing database file is not created."""
        if not os.path.exists(self.db_path):
            return self.available()

        conn = self._get_connection()
        try:
            applied = self._get_applied_migrations(conn)
        except sqlite3.Error as e:
            raise MigrationFailed(f"Cannot read migration state of {self.db_path}: {e}") from e
        finally:
            conn.close()
        return [f for f in self.available() if f not in applied]

    def run_migrations(self) -> list[str]:
        """Apply all pending migrations. Returns the filenames applied."""
        conn = self._get_connection()
        applied_now: list[str] = []
        try:
            try:
                self._ensure_migration_table(conn)
                applied = self._get_applied_migrations(conn)
            except sqlite3.Error as e:
                raise MigrationFailed(
                    f"Cannot read migration state of {self.db_path}: {e}"
                ) from e

            for filename in self.available():
                if filename not in applied:
                    logger.info("Applying migration: %s", filename)
                    self._apply_migration(conn, filename)
                    applied_now.append(filename)

            logger.info("All migrations applied (%d new).", len(applied_now))
            return applied_now
        finally:
            conn.close()

    def _read_up_script(self, filename: str) -> str:
        path = os.path.join(self.migrations_dir, filename)
        with open(path) as f:
            content = f.read()
        return content.split(DOWN_MARKER, 1)[0]

    def _apply_migration(self, conn: sqlite3.Connection, filename: str) -> None:
        statements = split_statements(self._read_up_script(filename))
        try:
            conn.execute("BEGIN")
            for statement in statements:
                conn.execute(statement)
            conn.execute("INSERT INTO _migrations (filename) VALUES (?)", (filename,))
            conn.execute("COMMIT")
        except sqlite3.Error as e:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            logger.error("Migration %s failed: %s", filename, e)
            raise MigrationFailed(f"Migration {filename} failed: {e}", filename=filename) from e
