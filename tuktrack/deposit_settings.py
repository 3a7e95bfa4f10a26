"""A table of what one driver is expected to deposit on each weekday."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from tuktrack.deposit_dao import DepositDao
from tuktrack.records import DriverDepositSetting, weekday_name, weekday_number

_HEADERS = ("Jour", "Amount (Ar)")


class DepositSettingModel:
    """The expected deposits of a driver, one row per weekday, in weekday order."""

    def __init__(self, dao: DepositDao) -> None:
        self._dao = dao
        self._settings: list[DriverDepositSetting] = []

    @property
    def settings(self) -> list[DriverDepositSetting]:
        """The loaded settings, Monday first."""
        return list(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def __iter__(self) -> Iterator[DriverDepositSetting]:
        return iter(self._settings)

    def header(self, section: int) -> Optional[str]:
        """Return the title of a column, or ``None`` for an unknown column."""
        if 0 <= section < len(_HEADERS):
            return _HEADERS[section]
        return None

    def column_count(self) -> int:
        """Return the number of columns: the weekday and the amount."""
        return len(_HEADERS)

    def data(self, row: int, column: int) -> Union[str, float, None]:
        """Return the weekday name (column 0) or the amount (column 1) of a row."""
        setting = self._settings[row]
        if column == 0:
            return weekday_name(setting.day_of_week)
        if column == 1:
            return setting.amount
        return None

    def expected_deposit_for(self, weekday: int) -> float:
        """Return the amount expected on an ISO weekday, or 0 when none is set."""
        return next(
            (s.amount for s in self._settings if s.day_of_week == weekday), 0.0
        )

    def load(self, driver_id: int) -> None:
        """Load the settings of a driver, sorted by weekday."""
        self._settings = sorted(
            self._dao.settings(driver_id), key=lambda setting: setting.day_of_week
        )

    def _setting_id(self, weekday: int) -> int:
        return next(
            (s.id for s in self._settings if s.day_of_week == weekday), -1
        )

    def add_settings(
        self, driver_id: int, days_of_week: Iterable[str], expected_amount: float
    ) -> None:
        """Set the expected amount on each named weekday, then reload the driver."""
        for name in days_of_week:
            day = weekday_number(name)
            setting = DriverDepositSetting(
                id=self._setting_id(day),
                driver_id=driver_id,
                day_of_week=day,
                amount=expected_amount,
            )
            if setting.id > 0:
                self._dao.update_setting(setting)
            else:
                self._dao.add_setting(setting)
        self.load(driver_id)