"""Pytest fixtures for weightplan tests."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
import structlog

from weightplan.db.connection import DatabaseConnection, set_db
from weightplan.tracking.models import Sex, UserProfile


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a CLI invocation left behind."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_db():
    """Create a temporary database with schema."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db = DatabaseConnection(db_path)
    db.initialize_schema()

    yield db

    # Cleanup
    db_path.unlink(missing_ok=True)


@pytest.fixture
def cli_db(temp_db):
    """Point the CLI's global database at the temporary database."""
    set_db(temp_db)
    yield temp_db
    set_db(None)


@pytest.fixture
def reference_profile() -> UserProfile:
    """180 lb, 5'10", 30 year old male (BMR 1783 kcal)."""
    return UserProfile(
        age=30,
        weight_lbs=180.0,
        height_feet=5,
        height_inches=10,
        sex=Sex.MALE,
        calories_eaten=2000.0,
        calories_burned_exercise=0.0,
        goal_weight_lbs=170.0,
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def losing_profile() -> UserProfile:
    """200 lb male eating 1800 kcal + 300 kcal exercise, starting on a Wednesday.

    BMR 1873 kcal, net -373 kcal/day.
    """
    return UserProfile(
        age=30,
        weight_lbs=200.0,
        height_feet=5,
        height_inches=10,
        sex=Sex.MALE,
        calories_eaten=1800.0,
        calories_burned_exercise=300.0,
        goal_weight_lbs=180.0,
        start_date=date(2024, 1, 3),  # Wednesday
    )
