"""SQLite database connection manager with schema bootstrap.

Manages the connection lifecycle, applies PRAGMAs (foreign keys,
busy_timeout) on every connect, and runs pending SQL migrations from the
packaged migrations/ directory using PRAGMA user_version for tracking.
"""

import logging
import sqlite3
from pathlib import Path

from league.exceptions import ConnectionUnavailable

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

# Creation order: every table after the ones it references.
TABLES = (
    "coaches",
    "players",
    "matches",
    "statistics",
    "users",
    "opinions",
    "participations",
    "follows",
)


class Database:
    """SQLite connection manager.

    Usage::

        db = Database("data/vnl.db")
        db.connect()
        db.create_schema()
        # ... use db.conn ...
        db.close()

    Or as a context manager::

        with Database("data/vnl.db") as db:
            db.create_schema()
            # ... use db.conn ...
    """

    def __init__(self, db_path: str | Path) -> None:
        self.db_path = str(db_path)
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = None

    def connect(self) -> sqlite3.Connection:
        """Open the connection and configure PRAGMAs.

        Foreign keys are off by default in SQLite and must be enabled on
        every connection for the schema's REFERENCES clauses to be enforced.
        """
        self._conn = sqlite3.connect(self.db_path)
        self._conn.row_factory = sqlite3.Row
        # PRAGMAs must be set per-connection
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._conn.execute("PRAGMA busy_timeout = 5000")
        logger.info("Connected to database %s", self.db_path)
        return self._conn

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    @property
    def conn(self) -> sqlite3.Connection:
        """Return the active connection or raise if not connected."""
        if self._conn is None:
            raise ConnectionUnavailable(
                "Database not connected. Call connect() first."
            )
        return self._conn

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            logger.info("Closed database connection")

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def get_schema_version(self) -> int:
        """Return the current schema version (PRAGMA user_version)."""
        return self.conn.execute("PRAGMA user_version").fetchone()[0]

    def apply_migrations(self, migrations_dir: Path | None = None) -> int:
        """Apply pending SQL migration files.

        Migration files are named ``NNN_description.sql`` where NNN is
        the version number.  Files with version <= current user_version
        are skipped.  After each file is applied, user_version is set
        to the file's version number.

        Returns:
            Number of migrations applied.
        """
        migrations_dir = Path(migrations_dir or MIGRATIONS_DIR)

        current = self.get_schema_version()
        applied = 0

        for migration_file in sorted(migrations_dir.glob("*.sql")):
            # 001_initial.sql -> 1
            version = int(migration_file.name.split("_")[0])
            if version <= current:
                continue

            sql = migration_file.read_text(encoding="utf-8")
            self.conn.executescript(sql)
            self.conn.execute(f"PRAGMA user_version = {version}")
            logger.info("Applied migration %s", migration_file.name)
            applied += 1

        return applied

    def create_schema(self) -> bool:
        """Create every table that does not exist yet.

        Returns False (and logs) instead of raising when no connection is
        open, so startup can report the problem and shut down cleanly.
        """
        if self._conn is None:
            logger.error("No database connection, cannot create the tables")
            return False

        try:
            self.apply_migrations()
        except sqlite3.Error as e:
            logger.error("Could not create the tables: %s", e)
            return False

        logger.info("Schema ready (version %d)", self.get_schema_version())
        return True

    def is_empty(self, table: str) -> bool:
        """Return True if *table* holds no rows."""
        if table not in TABLES:
            raise ValueError(f"Unknown table: {table}")
        row = self.conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
        return row[0] == 0
