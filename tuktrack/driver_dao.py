"""Storage of drivers and of their tuk-tuk assignments."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Optional

from tuktrack.records import TukDriver, TukDriverSetting

_DRIVER_COLUMNS = (
    "driver.id, driver.first_name, driver.last_name, driver.phone, "
    "driver.id_number, driver.active, driver.id_photo"
)


def _iso(day: Optional[date]) -> Optional[str]:
    return day.isoformat() if day is not None else None


def _parse_date(text: Optional[str]) -> Optional[date]:
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _driver_from_row(row: tuple) -> TukDriver:
    driver_id, first_name, last_name, phone, id_number, active, id_photo = row
    return TukDriver(
        id=driver_id,
        first_name=first_name or "",
        last_name=last_name or "",
        phone_number=phone or "",
        id_number=id_number or "",
        active=bool(active),
        id_photo=id_photo or "",
    )


class DriverDao:
    """Reads and writes drivers through an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _fetch_drivers(self, sql: str, parameters: tuple = ()) -> list[TukDriver]:
        rows = self._connection.execute(sql, parameters).fetchall()
        return [_driver_from_row(row) for row in rows]

    def drivers(self) -> list[TukDriver]:
        """Return every driver, newest first."""
        return self._fetch_drivers(
            f"SELECT {_DRIVER_COLUMNS} FROM driver ORDER BY driver.id DESC"
        )

    def drivers_for_tuk(self, tuk_id: int) -> list[TukDriver]:
        """Return the drivers assigned to a tuk-tuk, newest first."""
        return self._fetch_drivers(
            f"""
            SELECT {_DRIVER_COLUMNS} FROM driver
            INNER JOIN rickshaw_driver ON rickshaw_driver.driver_id = driver.id
            WHERE rickshaw_driver.rickshaw_id = ?
            ORDER BY driver.id DESC
            """,
            (tuk_id,),
        )

    def drivers_for_shift(self, shift: str) -> list[TukDriver]:
        """Return the drivers working a shift, ordered by first name."""
        return self._fetch_drivers(
            f"""
            SELECT {_DRIVER_COLUMNS} FROM driver
            INNER JOIN rickshaw_driver ON rickshaw_driver.driver_id = driver.id
            WHERE rickshaw_driver.shift = ?
            ORDER BY driver.first_name
            """,
            (shift,),
        )

    def get(self, driver_id: int) -> Optional[TukDriver]:
        """Return the driver with this id, or ``None``."""
        row = self._connection.execute(
            f"SELECT {_DRIVER_COLUMNS} FROM driver WHERE driver.id = ?",
            (driver_id,),
        ).fetchone()
        return _driver_from_row(row) if row is not None else None

    def get_setting(self, driver_id: int) -> Optional[TukDriverSetting]:
        """Return the tuk-tuk assignment of a driver, or ``None``."""
        row = self._connection.execute(
            """
            SELECT rickshaw_driver.id, rickshaw.registration_number,
                   rickshaw_driver.shift, rickshaw_driver.start_date,
                   rickshaw_driver.rickshaw_id
            FROM rickshaw_driver
            INNER JOIN rickshaw ON rickshaw.id = rickshaw_driver.rickshaw_id
            WHERE rickshaw_driver.driver_id = ?
            """,
            (driver_id,),
        ).fetchone()
        if row is None:
            return None
        setting_id, tuk_number, shift, start_date, tuk_id = row
        return TukDriverSetting(
            id=setting_id,
            tuk_number=tuk_number or "",
            driver_id=driver_id,
            shift=shift or "",
            start_date=_parse_date(start_date),
            tuk_id=tuk_id,
        )

    def add(self, driver: TukDriver) -> None:
        """Insert ``driver`` and set its ``id`` to the new row's id."""
        with self._connection:
            cursor = self._connection.execute(
                """
                INSERT INTO driver(first_name, last_name, phone, id_number, id_photo)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    driver.first_name,
                    driver.last_name,
                    driver.phone_number,
                    driver.id_number,
                    driver.id_photo,
                ),
            )
        driver.id = cursor.lastrowid

    def add_setting(self, setting: TukDriverSetting) -> None:
        """Insert an assignment and set its ``id`` to the new row's id."""
        with self._connection:
            cursor = self._connection.execute(
                """
                INSERT INTO rickshaw_driver(rickshaw_id, driver_id, shift, start_date)
                VALUES (?, ?, ?, ?)
                """,
                (
                    setting.tuk_id,
                    setting.driver_id,
                    setting.shift,
                    _iso(setting.start_date),
                ),
            )
        setting.id = cursor.lastrowid

    def update(self, driver: TukDriver) -> None:
        """Store the names, phone and id number of ``driver``."""
        with self._connection:
            self._connection.execute(
                """
                UPDATE driver
                SET last_name = ?,
                    first_name = ?,
                    phone = ?,
                    id_number = ?
                WHERE id = ?
                """,
                (
                    driver.last_name,
                    driver.first_name,
                    driver.phone_number,
                    driver.id_number,
                    driver.id,
                ),
            )

    def update_setting(self, setting: TukDriverSetting) -> None:
        """Store the tuk-tuk, shift and start date of an assignment."""
        with self._connection:
            self._connection.execute(
                """
                UPDATE rickshaw_driver
                SET rickshaw_id = ?,
                    shift = ?,
                    start_date = ?
                WHERE id = ?
                """,
                (
                    setting.tuk_id,
                    setting.shift,
                    _iso(setting.start_date),
                    setting.id,
                ),
            )

    def retire(self, driver_id: int, today: Optional[date] = None) -> None:
        """Mark a driver inactive and end their assignments on ``today``."""
        end = today if today is not None else date.today()
        with self._connection:
            self._connection.execute(
                "UPDATE driver SET active = 0 WHERE id = ?", (driver_id,)
            )
            self._connection.execute(
                "UPDATE rickshaw_driver SET end_date = ? WHERE driver_id = ?",
                (end.isoformat(), driver_id),
            )

    def activate(self, driver_id: int) -> None:
        """Mark a driver active again and clear the end of their assignments."""
        with self._connection:
            self._connection.execute(
                "UPDATE driver SET active = 1 WHERE id = ?", (driver_id,)
            )
            self._connection.execute(
                "UPDATE rickshaw_driver SET end_date = NULL WHERE driver_id = ?",
                (driver_id,),
            )

    def remove(self, driver_id: int) -> None:
        """Delete a driver; their assignments go with them."""
        with self._connection:
            self._connection.execute("DELETE FROM driver WHERE id = ?", (driver_id,))