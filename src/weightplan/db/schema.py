"""SQLite database schema definitions."""

SCHEMA_SQL = """
-- Single JSON records stored under fixed keys (e.g. the user profile)
CREATE TABLE IF NOT EXISTS app_state (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Self-reported actuals, one row per calendar day (YYYY-MM-DD)
CREATE TABLE IF NOT EXISTS measurements (
    date TEXT PRIMARY KEY,
    weight_lbs REAL,
    calories_eaten REAL,
    calories_burned_exercise REAL,
    completed_goals TEXT NOT NULL DEFAULT '[]',
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def get_schema_sql() -> str:
    """Return the complete schema SQL."""
    return SCHEMA_SQL


# Tables the stores read and write; all must exist before use
TABLES = ("app_state", "measurements")
