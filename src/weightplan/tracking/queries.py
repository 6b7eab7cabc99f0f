"""Database queries for the user profile and logged measurements."""

from __future__ import annotations

import json
import sqlite3
from datetime import date
from typing import Optional, Union

import structlog

from weightplan.tracking.models import Measurement, UserProfile

logger = structlog.get_logger(__name__)

DateLike = Union[date, str]


def _date_key(day: DateLike) -> str:
    if isinstance(day, date):
        return day.isoformat()
    return date.fromisoformat(day[:10]).isoformat()


class ProfileStore:
    """The single user profile, stored as one JSON record."""

    KEY = "user_data"

    @staticmethod
    def load(
        conn: sqlite3.Connection, today: Optional[date] = None
    ) -> Optional[UserProfile]:
        """Load the stored profile.

        A record without a start date is backfilled with today's date.
        """
        row = conn.execute(
            "SELECT value FROM app_state WHERE key = ?", (ProfileStore.KEY,)
        ).fetchone()

        if row is None:
            return None

        data = json.loads(row[0])
        if not (data.get("start_date") or data.get("startDate")):
            data["start_date"] = (today or date.today()).isoformat()
            logger.info("profile_start_date_backfilled", start_date=data["start_date"])

        return UserProfile.from_dict(data)

    @staticmethod
    def save(conn: sqlite3.Connection, profile: UserProfile) -> None:
        """Insert or replace the stored profile."""
        conn.execute(
            """
            INSERT OR REPLACE INTO app_state (key, value, updated_at)
            VALUES (?, ?, CURRENT_TIMESTAMP)
            """,
            (ProfileStore.KEY, json.dumps(profile.to_dict())),
        )
        conn.commit()
        logger.debug("profile_saved")

    @staticmethod
    def clear(conn: sqlite3.Connection) -> bool:
        """Delete the stored profile. Returns True if one existed."""
        cursor = conn.execute(
            "DELETE FROM app_state WHERE key = ?", (ProfileStore.KEY,)
        )
        conn.commit()
        return cursor.rowcount > 0


class MeasurementStore:
    """Self-reported actuals keyed by calendar date."""

    @staticmethod
    def _row_to_measurement(row: sqlite3.Row) -> Measurement:
        return Measurement(
            date=row[0],
            weight_lbs=row[1],
            calories_eaten=row[2],
            calories_burned_exercise=row[3],
            completed_goals=json.loads(row[4]) if row[4] else [],
        )

    @staticmethod
    def get(conn: sqlite3.Connection, day: DateLike) -> Optional[Measurement]:
        """Get the measurement for a date."""
        row = conn.execute(
            """
            SELECT date, weight_lbs, calories_eaten, calories_burned_exercise,
                   completed_goals
            FROM measurements WHERE date = ?
            """,
            (_date_key(day),),
        ).fetchone()

        if row is None:
            return None
        return MeasurementStore._row_to_measurement(row)

    @staticmethod
    def save(conn: sqlite3.Connection, measurement: Measurement) -> Measurement:
        """
        Merge a measurement into the record for its date.

        Fields left as None keep whatever is already stored, so logging the
        weight does not erase the calories logged earlier the same day.
        Completed goals are replaced only when the new list is non-empty.

        Returns:
            The merged record as stored
        """
        existing = MeasurementStore.get(conn, measurement.date)

        if existing is None:
            merged = measurement
        else:
            merged = Measurement(
                date=measurement.date,
                weight_lbs=(
                    measurement.weight_lbs
                    if measurement.weight_lbs is not None
                    else existing.weight_lbs
                ),
                calories_eaten=(
                    measurement.calories_eaten
                    if measurement.calories_eaten is not None
                    else existing.calories_eaten
                ),
                calories_burned_exercise=(
                    measurement.calories_burned_exercise
                    if measurement.calories_burned_exercise is not None
                    else existing.calories_burned_exercise
                ),
                completed_goals=(
                    measurement.completed_goals or existing.completed_goals
                ),
            )

        MeasurementStore._write(conn, merged)
        return merged

    @staticmethod
    def _write(conn: sqlite3.Connection, measurement: Measurement) -> None:
        conn.execute(
            """
            INSERT OR REPLACE INTO measurements
                (date, weight_lbs, calories_eaten, calories_burned_exercise,
                 completed_goals, updated_at)
            VALUES (?, ?, ?, ?, ?, CURRENT_TIMESTAMP)
            """,
            (
                measurement.date,
                measurement.weight_lbs,
                measurement.calories_eaten,
                measurement.calories_burned_exercise,
                json.dumps(measurement.completed_goals),
            ),
        )
        conn.commit()

    @staticmethod
    def toggle_goal(conn: sqlite3.Connection, day: DateLike, goal: str) -> Measurement:
        """Mark a daily goal complete for a date, or un-mark it if already done."""
        key = _date_key(day)
        existing = MeasurementStore.get(conn, key) or Measurement(date=key)

        if goal in existing.completed_goals:
            goals = [g for g in existing.completed_goals if g != goal]
        else:
            goals = existing.completed_goals + [goal]

        updated = Measurement(
            date=key,
            weight_lbs=existing.weight_lbs,
            calories_eaten=existing.calories_eaten,
            calories_burned_exercise=existing.calories_burned_exercise,
            completed_goals=goals,
        )
        # Written directly: an emptied goal list must replace the stored one
        MeasurementStore._write(conn, updated)
        return updated

    @staticmethod
    def load_all(conn: sqlite3.Connection) -> list[Measurement]:
        """All measurements, oldest first."""
        rows = conn.execute(
            """
            SELECT date, weight_lbs, calories_eaten, calories_burned_exercise,
                   completed_goals
            FROM measurements
            ORDER BY date ASC
            """
        ).fetchall()
        return [MeasurementStore._row_to_measurement(row) for row in rows]

    @staticmethod
    def load_range(
        conn: sqlite3.Connection, start_date: DateLike, end_date: DateLike
    ) -> list[Measurement]:
        """Measurements between two dates (inclusive), oldest first."""
        rows = conn.execute(
            """
            SELECT date, weight_lbs, calories_eaten, calories_burned_exercise,
                   completed_goals
            FROM measurements
            WHERE date >= ? AND date <= ?
            ORDER BY date ASC
            """,
            (_date_key(start_date), _date_key(end_date)),
        ).fetchall()
        return [MeasurementStore._row_to_measurement(row) for row in rows]

    @staticmethod
    def most_recent_weight_in_range(
        conn: sqlite3.Connection, start_date: DateLike, end_date: DateLike
    ) -> Optional[float]:
        """Weight from the latest record in range that has one logged."""
        row = conn.execute(
            """
            SELECT weight_lbs FROM measurements
            WHERE date >= ? AND date <= ? AND weight_lbs IS NOT NULL
            ORDER BY date DESC LIMIT 1
            """,
            (_date_key(start_date), _date_key(end_date)),
        ).fetchone()
        return row[0] if row else None

    @staticmethod
    def delete(conn: sqlite3.Connection, day: DateLike) -> bool:
        """Delete the record for a date. Returns True if one existed."""
        cursor = conn.execute(
            "DELETE FROM measurements WHERE date = ?", (_date_key(day),)
        )
        conn.commit()
        return cursor.rowcount > 0

    @staticmethod
    def clear(conn: sqlite3.Connection) -> int:
        """Delete all measurements and return how many were removed."""
        cursor = conn.execute("DELETE FROM measurements")
        conn.commit()
        return cursor.rowcount
