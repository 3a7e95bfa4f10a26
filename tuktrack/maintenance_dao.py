"""Storage of tuk-tuk maintenance jobs and the cost figures drawn from them."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Optional

from tuktrack.maintenance import TukMaintenance

_MAINTENANCE_SELECT = """
    SELECT maintenance.id, maintenance.rickshaw_id, rickshaw.registration_number,
           maintenance.maintenance_type, maintenance.description,
           maintenance.scheduled_date, maintenance.performed_date,
           maintenance.is_recurring, maintenance.recurrence_days, maintenance.cost
    FROM maintenance
    INNER JOIN rickshaw ON maintenance.rickshaw_id = rickshaw.id
"""


def _iso(day: Optional[date]) -> Optional[str]:
    return day.isoformat() if day is not None else None


def _parse_date(text: Optional[str]) -> Optional[date]:
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _maintenance_from_row(row: tuple) -> TukMaintenance:
    (
        maintenance_id,
        tuk_id,
        tuk_number,
        maintenance_type,
        description,
        scheduled_date,
        performed_date,
        recurring,
        recurrence_days,
        cost,
    ) = row
    return TukMaintenance(
        id=maintenance_id,
        tuk_id=tuk_id,
        tuk_number=tuk_number or "",
        maintenance_type=maintenance_type or "",
        description=description or "",
        scheduled_date=_parse_date(scheduled_date),
        performed_date=_parse_date(performed_date),
        recurring=bool(recurring),
        recurrence_days=recurrence_days or 0,
        cost=float(cost or 0),
    )


class MaintenanceDao:
    """Reads and writes maintenance jobs through an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _fetch(self, sql: str, parameters: tuple = ()) -> list[TukMaintenance]:
        rows = self._connection.execute(sql, parameters).fetchall()
        return [_maintenance_from_row(row) for row in rows]

    def add(self, maintenance: TukMaintenance) -> None:
        """Insert a job and set its ``id`` to the new row's id."""
        with self._connection:
            cursor = self._connection.execute(
                """
                INSERT INTO maintenance(maintenance_type, description, scheduled_date,
                                        performed_date, is_recurring, recurrence_days,
                                        cost, rickshaw_id)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    maintenance.maintenance_type,
                    maintenance.description,
                    _iso(maintenance.scheduled_date),
                    _iso(maintenance.performed_date),
                    int(maintenance.recurring),
                    maintenance.recurrence_days,
                    maintenance.cost,
                    maintenance.tuk_id,
                ),
            )
        maintenance.id = cursor.lastrowid

    def update(self, maintenance: TukMaintenance) -> None:
        """Store every field of a job except its tuk-tuk."""
        with self._connection:
            self._connection.execute(
                """
                UPDATE maintenance
                SET maintenance_type = ?,
                    description = ?,
                    scheduled_date = ?,
                    performed_date = ?,
                    is_recurring = ?,
                    recurrence_days = ?,
                    cost = ?
                WHERE id = ?
                """,
                (
                    maintenance.maintenance_type,
                    maintenance.description,
                    _iso(maintenance.scheduled_date),
                    _iso(maintenance.performed_date),
                    int(maintenance.recurring),
                    maintenance.recurrence_days,
                    maintenance.cost,
                    maintenance.id,
                ),
            )

    def get(self, maintenance_id: int) -> Optional[TukMaintenance]:
        """Return the job with this id, or ``None``."""
        row = self._connection.execute(
            _MAINTENANCE_SELECT + " WHERE maintenance.id = ?", (maintenance_id,)
        ).fetchone()
        return _maintenance_from_row(row) if row is not None else None

    def remove(self, maintenance_id: int) -> None:
        """Delete a job."""
        with self._connection:
            self._connection.execute(
                "DELETE FROM maintenance WHERE id = ?", (maintenance_id,)
            )

    def scheduled(self, tuk_id: Optional[int] = None) -> list[TukMaintenance]:
        """Return the jobs not yet performed, of one tuk-tuk or of all.

        Across all tuk-tuks the jobs come in order of scheduled date.
        """
        if tuk_id is None:
            return self._fetch(
                _MAINTENANCE_SELECT
                + " WHERE maintenance.performed_date IS NULL"
                " ORDER BY maintenance.scheduled_date ASC"
            )
        return self._fetch(
            _MAINTENANCE_SELECT
            + " WHERE maintenance.rickshaw_id = ?"
            " AND maintenance.performed_date IS NULL",
            (tuk_id,),
        )

    def past(
        self, tuk_id: Optional[int] = None, today: Optional[date] = None
    ) -> list[TukMaintenance]:
        """Return the jobs performed on or before ``today``, of one tuk-tuk or of all."""
        day = (today if today is not None else date.today()).isoformat()
        if tuk_id is None:
            return self._fetch(
                _MAINTENANCE_SELECT + " WHERE maintenance.performed_date <= ?", (day,)
            )
        return self._fetch(
            _MAINTENANCE_SELECT
            + " WHERE maintenance.performed_date <= ? AND maintenance.rickshaw_id = ?",
            (day, tuk_id),
        )

    def between(self, start: date, end: date) -> list[TukMaintenance]:
        """Return the jobs performed from ``start`` to ``end``, latest first."""
        return self._fetch(
            _MAINTENANCE_SELECT
            + " WHERE maintenance.performed_date BETWEEN ? AND ?"
            " ORDER BY maintenance.performed_date DESC",
            (start.isoformat(), end.isoformat()),
        )

    def cost_between(self, start: date, end: date) -> float:
        """Return the total cost of jobs performed from ``start`` to ``end``."""
        row = self._connection.execute(
            """
            SELECT SUM(cost) FROM maintenance
            WHERE performed_date BETWEEN ? AND ?
            """,
            (start.isoformat(), end.isoformat()),
        ).fetchone()
        return float(row[0]) if row and row[0] is not None else 0.0

    def monthly_cost_between(self, start: date, end: date) -> list[tuple[str, float]]:
        """Return ``(YYYY-MM, total cost)`` pairs for the months in range, in order."""
        rows = self._connection.execute(
            """
            SELECT strftime('%Y-%m', performed_date) AS month, SUM(cost)
            FROM maintenance
            WHERE performed_date BETWEEN ? AND ?
            GROUP BY month
            ORDER BY month
            """,
            (start.isoformat(), end.isoformat()),
        ).fetchall()
        return [(month, float(total or 0)) for month, total in rows]

    def types(self) -> list[tuple[str, int]]:
        """Return each maintenance type, case folded, with its count, commonest first."""
        rows = self._connection.execute(
            """
            SELECT maintenance_type, COUNT(LOWER(maintenance_type)) AS occurence
            FROM maintenance
            GROUP BY LOWER(maintenance_type)
            ORDER BY occurence DESC
            """
        ).fetchall()
        return [(kind or "", int(count)) for kind, count in rows]

    def cost_by_tuk(self, start: date, end: date) -> list[tuple[str, float]]:
        """Return ``(registration number, total cost)`` pairs, cheapest first."""
        rows = self._connection.execute(
            """
            SELECT rickshaw.registration_number, SUM(maintenance.cost) AS total_cost
            FROM maintenance
            INNER JOIN rickshaw ON rickshaw.id = maintenance.rickshaw_id
            WHERE maintenance.performed_date BETWEEN ? AND ?
            GROUP BY rickshaw.registration_number
            ORDER BY total_cost ASC
            """,
            (start.isoformat(), end.isoformat()),
        ).fetchall()
        return [(number, float(total or 0)) for number, total in rows]

    def cost_by_type(self, start: date, end: date) -> list[tuple[str, float]]:
        """Return ``(maintenance type, total cost)`` pairs, cheapest first."""
        rows = self._connection.execute(
            """
            SELECT maintenance_type, SUM(cost) AS total_cost
            FROM maintenance
            WHERE performed_date BETWEEN ? AND ?
            GROUP BY maintenance_type
            ORDER BY total_cost ASC
            """,
            (start.isoformat(), end.isoformat()),
        ).fetchall()
        return [(kind or "", float(total or 0)) for kind, total in rows]