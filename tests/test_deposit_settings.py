import sqlite3

import pytest

from tuktrack.deposit_dao import DepositDao
from tuktrack.deposit_settings import DepositSettingModel
from tuktrack.records import DriverDepositSetting


@pytest.fixture
def dao():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        """CREATE TABLE driver_deposit_setting (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            driver_id INTEGER NOT NULL, weekday TEXT NOT NULL,
            expected_amount INTEGER NOT NULL)"""
    )
    yield DepositDao(conn)
    conn.close()


@pytest.fixture
def model(dao):
    return DepositSettingModel(dao)


def test_headers_and_columns(model):
    assert model.header(0) == "Jour"
    assert model.header(1) == "Amount (Ar)"
    assert model.header(2) is None
    assert model.column_count() == 2


def test_load_sorts_by_weekday(dao, model):
    for day in (5, 1, 3):
        dao.add_setting(DriverDepositSetting(driver_id=1, day_of_week=day, amount=day * 100))
    model.load(1)
    assert [s.day_of_week for s in model] == [1, 3, 5]
    assert len(model) == 3


def test_data_columns(dao, model):
    dao.add_setting(DriverDepositSetting(driver_id=1, day_of_week=2, amount=700))
    model.load(1)
    assert model.data(0, 0) == "Tuesday"
    assert model.data(0, 1) == 700.0
    assert model.data(0, 5) is None
    with pytest.raises(IndexError):
        model.data(1, 0)


def test_add_settings_inserts_then_updates(dao, model):
    model.add_settings(1, ["Monday", "Friday"], 20000)
    assert [(s.day_of_week, s.amount) for s in model] == [(1, 20000.0), (5, 20000.0)]
    ids = [s.id for s in model]
    model.add_settings(1, ["Friday", "Sunday"], 25000)
    settings = model.settings
    assert [s.day_of_week for s in settings] == [1, 5, 7]
    assert settings[1].id == ids[1]
    assert settings[1].amount == 25000.0
    assert settings[0].amount == 20000.0
    assert len(dao.settings(1)) == 3


def test_add_settings_rejects_unknown_day(model):
    with pytest.raises(ValueError):
        model.add_settings(1, ["Funday"], 100)


def test_expected_deposit_for(model):
    model.add_settings(1, ["Wednesday"], 15000)
    assert model.expected_deposit_for(3) == 15000.0
    assert model.expected_deposit_for(4) == 0.0