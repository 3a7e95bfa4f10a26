"""Plain records for tuk-tuks, drivers, shifts and deposits."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_WEEKDAY_NUMBER = {name: number for number, name in enumerate(_WEEKDAYS, start=1)}


def weekday_number(name: str) -> int:
    """Return the ISO weekday number (Monday is 1) for an English day name."""
    try:
        return _WEEKDAY_NUMBER[name]
    except KeyError:
        raise ValueError(f"unknown weekday name: {name!r}") from None


def weekday_name(number: int) -> str:
    """Return the English day name for an ISO weekday number (1 to 7)."""
    if not isinstance(number, int) or not 1 <= number <= len(_WEEKDAYS):
        raise ValueError(f"weekday number out of range: {number!r}")
    return _WEEKDAYS[number - 1]


@dataclass
class TukTuk:
    """A rickshaw of the fleet."""

    id: int = -1
    registration_number: str = ""
    model: str = ""
    purchase_date: Optional[date] = None
    status: str = "active"  # "active", "in_maintenance" or "retired"
    phase: int = 0


@dataclass
class TukDriver:
    """A driver; two drivers compare equal when every field matches."""

    id: int = -1
    last_name: str = ""
    first_name: str = ""
    id_number: str = ""
    phone_number: str = ""
    active: bool = True
    id_photo: str = ""


@dataclass
class TukDriverSetting:
    """The assignment of a driver to a tuk-tuk and a shift."""

    id: int = -1
    tuk_number: str = ""
    driver_id: int = -1
    shift: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    tuk_id: int = -1


@dataclass
class DriverDeposit:
    """Money handed in by a driver on a given day."""

    id: int = -1
    driver_id: int = -1
    driver_name: str = ""
    tuk_id: int = -1
    tuk_number: str = ""
    date: Optional[date] = None
    amount: float = 0.0
    note: str = ""


@dataclass
class DriverDepositSetting:
    """The amount a driver is expected to deposit on one weekday."""

    id: int = -1
    driver_id: int = -1
    day_of_week: int = 1
    amount: float = 0.0

    @property
    def weekday(self) -> str:
        """The English name of ``day_of_week``."""
        return weekday_name(self.day_of_week)