"""Storage of tuk-tuks in the ``rickshaw`` table."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Optional

from tuktrack.records import TukTuk

_COLUMNS = "id, registration_number, model, purchase_date, status, phase"


def _iso(day: Optional[date]) -> Optional[str]:
    return day.isoformat() if day is not None else None


def _parse_date(text: Optional[str]) -> Optional[date]:
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _tuk_from_row(row: tuple) -> TukTuk:
    tuk_id, registration_number, model, purchase_date, status, phase = row
    return TukTuk(
        id=tuk_id,
        registration_number=registration_number or "",
        model=model or "",
        purchase_date=_parse_date(purchase_date),
        status=status or "",
        phase=phase or 0,
    )


class TukTukDao:
    """Reads and writes tuk-tuks through an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def all(self) -> list[TukTuk]:
        """Return every tuk-tuk, newest first."""
        rows = self._connection.execute(
            f"SELECT {_COLUMNS} FROM rickshaw ORDER BY id DESC"
        ).fetchall()
        return [_tuk_from_row(row) for row in rows]

    def add(self, tuk: TukTuk) -> None:
        """Insert ``tuk`` and set its ``id`` to the new row's id."""
        with self._connection:
            cursor = self._connection.execute(
                """
                INSERT INTO rickshaw(registration_number, model, purchase_date, status, phase)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    tuk.registration_number,
                    tuk.model,
                    _iso(tuk.purchase_date),
                    tuk.status,
                    tuk.phase,
                ),
            )
        tuk.id = cursor.lastrowid

    def get(self, plate_number: str) -> Optional[TukTuk]:
        """Return the tuk-tuk with this registration number, or ``None``."""
        row = self._connection.execute(
            f"SELECT {_COLUMNS} FROM rickshaw WHERE registration_number = ?",
            (plate_number,),
        ).fetchone()
        return _tuk_from_row(row) if row is not None else None

    def get_id(self, plate_number: str) -> Optional[int]:
        """Return the id of the tuk-tuk with this registration number, or ``None``."""
        row = self._connection.execute(
            "SELECT id FROM rickshaw WHERE registration_number = ?",
            (plate_number,),
        ).fetchone()
        return row[0] if row is not None else None

    def update(self, tuk: TukTuk) -> None:
        """Store the number, model, purchase date and phase of ``tuk``."""
        with self._connection:
            self._connection.execute(
                """
                UPDATE rickshaw
                SET registration_number = ?,
                    model = ?,
                    purchase_date = ?,
                    phase = ?
                WHERE id = ?
                """,
                (
                    tuk.registration_number,
                    tuk.model,
                    _iso(tuk.purchase_date),
                    tuk.phase,
                    tuk.id,
                ),
            )

    def remove(self, tuk_id: int) -> None:
        """Delete the tuk-tuk with this id."""
        with self._connection:
            self._connection.execute("DELETE FROM rickshaw WHERE id = ?", (tuk_id,))

    def change_status(self, tuk_id: int, status: str) -> None:
        """Set the status of a tuk-tuk."""
        with self._connection:
            self._connection.execute(
                "UPDATE rickshaw SET status = ? WHERE id = ?", (status, tuk_id)
            )