"""SQLite storage file for the profile and measurement log."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

import structlog

from weightplan.db.schema import TABLES, get_schema_sql

logger = structlog.get_logger(__name__)


class DatabaseConnection:
    """Opens short-lived connections to the weightplan database file.

    Every command opens one connection, does its reads and writes, and
    closes it. A connection commits on a clean exit and rolls back if the
    block raises.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Yield a connection with ``sqlite3.Row`` rows.

        Example:
            with db.get_connection() as conn:
                entries = MeasurementStore.load_all(conn)
        """
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize_schema(self) -> None:
        """Create any missing tables. Safe to call repeatedly."""
        with self.get_connection() as conn:
            conn.executescript(get_schema_sql())

    def table_exists(self, table_name: str) -> bool:
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
                (table_name,),
            ).fetchone()
        return row is not None

    def ensure_schema(self) -> bool:
        """Create the tables if any are missing.

        Returns:
            True if the schema had to be created
        """
        missing = [name for name in TABLES if not self.table_exists(name)]
        if not missing:
            return False
        logger.info("schema_created", db_path=str(self.db_path), tables=missing)
        self.initialize_schema()
        return True


# Global database instance (lazy loaded)
_db: Optional[DatabaseConnection] = None


def get_db() -> DatabaseConnection:
    """Return the shared database, opening the configured file on first use."""
    global _db
    if _db is None:
        from weightplan.config import get_settings

        _db = DatabaseConnection(get_settings().database.path)
    return _db


def set_db(db: Optional[DatabaseConnection]) -> None:
    """Replace the shared database; None goes back to the configured file."""
    global _db
    _db = db
