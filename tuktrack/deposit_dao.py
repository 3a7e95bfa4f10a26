"""Storage of driver deposits and of the deposits drivers are expected to make."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Optional

from tuktrack.records import (
    DriverDeposit,
    DriverDepositSetting,
    weekday_name,
    weekday_number,
)

_DEPOSIT_SELECT = """
    SELECT driver_deposit.id, driver.id, driver.first_name,
           rickshaw.id, rickshaw.registration_number,
           driver_deposit.date, driver_deposit.amount_deposited, driver_deposit.note
    FROM driver_deposit
    INNER JOIN driver ON driver.id = driver_deposit.driver_id
    INNER JOIN rickshaw ON rickshaw.id = driver_deposit.rickshaw_id
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


def _deposit_from_row(row: tuple) -> DriverDeposit:
    deposit_id, driver_id, first_name, tuk_id, tuk_number, day, amount, note = row
    return DriverDeposit(
        id=deposit_id,
        driver_id=driver_id,
        driver_name=first_name or "",
        tuk_id=tuk_id,
        tuk_number=tuk_number or "",
        date=_parse_date(day),
        amount=float(amount or 0),
        note=note or "",
    )


class DepositDao:
    """Reads and writes deposits and deposit settings through an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _fetch_deposits(self, sql: str, parameters: tuple = ()) -> list[DriverDeposit]:
        rows = self._connection.execute(sql, parameters).fetchall()
        return [_deposit_from_row(row) for row in rows]

    def settings(self, driver_id: int) -> list[DriverDepositSetting]:
        """Return the expected-deposit settings of a driver."""
        rows = self._connection.execute(
            """
            SELECT id, driver_id, weekday, expected_amount
            FROM driver_deposit_setting WHERE driver_id = ?
            """,
            (driver_id,),
        ).fetchall()
        return [
            DriverDepositSetting(
                id=setting_id,
                driver_id=owner,
                day_of_week=weekday_number(weekday),
                amount=float(amount),
            )
            for setting_id, owner, weekday, amount in rows
        ]

    def deposits_for_driver(self, driver_id: int) -> list[DriverDeposit]:
        """Return the deposits of a driver, latest date first."""
        return self._fetch_deposits(
            _DEPOSIT_SELECT
            + " WHERE driver_deposit.driver_id = ? ORDER BY driver_deposit.date DESC",
            (driver_id,),
        )

    def deposits_for_tuk(self, tuk_number: str) -> list[DriverDeposit]:
        """Return the deposits made for a tuk-tuk, latest date first."""
        return self._fetch_deposits(
            _DEPOSIT_SELECT
            + " WHERE rickshaw.registration_number = ?"
            " ORDER BY driver_deposit.date DESC",
            (tuk_number,),
        )

    def deposits_on(self, day: date) -> list[DriverDeposit]:
        """Return the deposits made on a day."""
        return self._fetch_deposits(
            _DEPOSIT_SELECT + " WHERE driver_deposit.date = ?",
            (day.isoformat(),),
        )

    def deposits_on_shift(self, day: date, shift: str) -> list[DriverDeposit]:
        """Return the deposits made on a day by drivers of a shift."""
        return self._fetch_deposits(
            _DEPOSIT_SELECT
            + """
            INNER JOIN rickshaw_driver ON rickshaw_driver.driver_id = driver.id
            WHERE driver_deposit.date = ? AND rickshaw_driver.shift = ?
            """,
            (day.isoformat(), shift),
        )

    def add_setting(self, setting: DriverDepositSetting) -> None:
        """Insert a setting and set its ``id`` to the new row's id."""
        with self._connection:
            cursor = self._connection.execute(
                """
                INSERT INTO driver_deposit_setting(driver_id, weekday, expected_amount)
                VALUES (?, ?, ?)
                """,
                (setting.driver_id, setting.weekday, setting.amount),
            )
        setting.id = cursor.lastrowid

    def add(self, deposit: DriverDeposit) -> None:
        """Insert a deposit and set its ``id`` to the new row's id."""
        with self._connection:
            cursor = self._connection.execute(
                """
                INSERT INTO driver_deposit(driver_id, rickshaw_id, date, amount_deposited, note)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    deposit.driver_id,
                    deposit.tuk_id,
                    _iso(deposit.date),
                    deposit.amount,
                    deposit.note,
                ),
            )
        deposit.id = cursor.lastrowid

    def update_setting(self, setting: DriverDepositSetting) -> None:
        """Store the amount of a setting, matched by id and weekday."""
        with self._connection:
            self._connection.execute(
                """
                UPDATE driver_deposit_setting
                SET expected_amount = ?
                WHERE weekday = ? AND id = ?
                """,
                (setting.amount, setting.weekday, setting.id),
            )

    def update(self, deposit: DriverDeposit) -> None:
        """Store the amount and note of a deposit."""
        with self._connection:
            self._connection.execute(
                "UPDATE driver_deposit SET amount_deposited = ?, note = ? WHERE id = ?",
                (deposit.amount, deposit.note, deposit.id),
            )

    def remove(self, deposit_id: int) -> None:
        """Delete a deposit."""
        with self._connection:
            self._connection.execute(
                "DELETE FROM driver_deposit WHERE id = ?", (deposit_id,)
            )

    def remove_setting(self, setting_id: int) -> None:
        """Delete a deposit setting."""
        with self._connection:
            self._connection.execute(
                "DELETE FROM driver_deposit_setting WHERE id = ?", (setting_id,)
            )

    def expected_amount(self, driver_id: int, weekday: int) -> Optional[float]:
        """Return what a driver should deposit on an ISO weekday, or ``None`` if unset."""
        row = self._connection.execute(
            """
            SELECT expected_amount FROM driver_deposit_setting
            WHERE driver_id = ? AND weekday = ?
            """,
            (driver_id, weekday_name(weekday)),
        ).fetchone()
        return float(row[0]) if row is not None else None

    def total_revenue_between(self, start: date, end: date) -> float:
        """Return the sum of deposits dated from ``start`` to ``end`` inclusive."""
        row = self._connection.execute(
            """
            SELECT SUM(amount_deposited) FROM driver_deposit
            WHERE date BETWEEN ? AND ?
            """,
            (start.isoformat(), end.isoformat()),
        ).fetchone()
        return float(row[0]) if row and row[0] is not None else 0.0

    def monthly_revenue_between(self, start: date, end: date) -> list[tuple[str, float]]:
        """Return ``(YYYY-MM, total)`` pairs for the months in range, in month order."""
        rows = self._connection.execute(
            """
            SELECT strftime('%Y-%m', date) AS month, SUM(amount_deposited)
            FROM driver_deposit
            WHERE date BETWEEN ? AND ?
            GROUP BY month
            ORDER BY month
            """,
            (start.isoformat(), end.isoformat()),
        ).fetchall()
        return [(month, float(total or 0)) for month, total in rows]

    def deposit_dates(self) -> list[date]:
        """Return every distinct deposit date, latest first."""
        rows = self._connection.execute(
            "SELECT date FROM driver_deposit GROUP BY date ORDER BY date DESC"
        ).fetchall()
        dates = (_parse_date(text) for (text,) in rows)
        return [day for day in dates if day is not None]

    def get(self, driver_id: int, day: date) -> Optional[DriverDeposit]:
        """Return the deposit of a driver on a day, or ``None``."""
        row = self._connection.execute(
            _DEPOSIT_SELECT
            + " WHERE driver_deposit.driver_id = ? AND driver_deposit.date = ?"
            " ORDER BY driver_deposit.date DESC",
            (driver_id, day.isoformat()),
        ).fetchone()
        return _deposit_from_row(row) if row is not None else None