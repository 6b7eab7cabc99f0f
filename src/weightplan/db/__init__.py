"""SQLite persistence for the profile and logged measurements."""

from __future__ import annotations

from weightplan.db.connection import DatabaseConnection, get_db, set_db

__all__ = [
    "DatabaseConnection",
    "get_db",
    "set_db",
]
