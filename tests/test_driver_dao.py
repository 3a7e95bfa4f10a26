import sqlite3
from datetime import date

import pytest

from tuktrack.driver_dao import DriverDao
from tuktrack.records import TukDriver, TukDriverSetting

_SCHEMA = """
CREATE TABLE rickshaw (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    registration_number TEXT NOT NULL UNIQUE,
    model TEXT,
    purchase_date TEXT,
    status TEXT CHECK(status IN ('active', 'in_maintenance', 'retired')) DEFAULT 'active',
    phase INTEGER
);
CREATE TABLE driver (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT,
    last_name TEXT NOT NULL,
    phone TEXT UNIQUE,
    id_number TEXT,
    active INTEGER DEFAULT 1,
    id_photo TEXT
);
CREATE TABLE rickshaw_driver (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    rickshaw_id INTEGER NOT NULL,
    driver_id INTEGER NOT NULL,
    shift TEXT CHECK(shift IN ('day', 'night')) NOT NULL,
    start_date TEXT NOT NULL,
    end_date TEXT,
    FOREIGN KEY (rickshaw_id) REFERENCES rickshaw(id) ON DELETE CASCADE,
    FOREIGN KEY (driver_id) REFERENCES driver(id) ON DELETE CASCADE
);
"""


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    conn.executescript(_SCHEMA)
    yield conn
    conn.close()


@pytest.fixture
def dao(connection):
    return DriverDao(connection)


def _add_tuk(connection, plate):
    with connection:
        cursor = connection.execute(
            "INSERT INTO rickshaw(registration_number) VALUES (?)", (plate,)
        )
    return cursor.lastrowid


def _driver(first, phone):
    return TukDriver(first_name=first, last_name="Doe", phone_number=phone, id_number="ID-1")


def _assign(dao, driver, tuk_id, shift="day"):
    setting = TukDriverSetting(
        driver_id=driver.id, tuk_id=tuk_id, shift=shift, start_date=date(2024, 1, 15)
    )
    dao.add_setting(setting)
    return setting


def test_add_sets_id_and_get_round_trips(dao):
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    assert driver.id > 0
    assert dao.get(driver.id) == driver


def test_get_missing_returns_none(dao):
    assert dao.get(42) is None
    assert dao.get_setting(42) is None


def test_drivers_newest_first(dao):
    names = ["Alice", "Bob", "Carl"]
    for index, name in enumerate(names):
        dao.add(_driver(name, f"phone-{index}"))
    assert [d.first_name for d in dao.drivers()] == list(reversed(names))


def test_duplicate_phone_is_rejected(dao):
    dao.add(_driver("Alice", "phone-a"))
    with pytest.raises(sqlite3.IntegrityError):
        dao.add(_driver("Bob", "phone-a"))


def test_setting_round_trips_with_tuk_number(dao, connection):
    tuk_id = _add_tuk(connection, "PLATE-A")
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    setting = _assign(dao, driver, tuk_id, "night")
    stored = dao.get_setting(driver.id)
    assert stored.id == setting.id
    assert stored.tuk_number == "PLATE-A"
    assert stored.tuk_id == tuk_id
    assert stored.shift == "night"
    assert stored.start_date == date(2024, 1, 15)
    assert stored.driver_id == driver.id


def test_invalid_shift_is_rejected(dao, connection):
    tuk_id = _add_tuk(connection, "PLATE-A")
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    with pytest.raises(sqlite3.IntegrityError):
        _assign(dao, driver, tuk_id, "evening")


def test_drivers_for_tuk_filters(dao, connection):
    first_tuk = _add_tuk(connection, "PLATE-A")
    second_tuk = _add_tuk(connection, "PLATE-B")
    alice, bob, carl = (_driver(n, f"phone-{n}") for n in ("Alice", "Bob", "Carl"))
    for driver in (alice, bob, carl):
        dao.add(driver)
    _assign(dao, alice, first_tuk)
    _assign(dao, bob, second_tuk)
    _assign(dao, carl, first_tuk, "night")
    assert [d.first_name for d in dao.drivers_for_tuk(first_tuk)] == ["Carl", "Alice"]
    assert [d.id for d in dao.drivers_for_tuk(second_tuk)] == [bob.id]


def test_drivers_for_shift_sorted_by_first_name(dao, connection):
    tuk_id = _add_tuk(connection, "PLATE-A")
    zed, amy, night = (_driver(n, f"phone-{n}") for n in ("Zed", "Amy", "Nora"))
    for driver in (zed, amy, night):
        dao.add(driver)
    _assign(dao, zed, tuk_id, "day")
    _assign(dao, amy, tuk_id, "day")
    _assign(dao, night, tuk_id, "night")
    assert [d.first_name for d in dao.drivers_for_shift("day")] == ["Amy", "Zed"]
    assert [d.first_name for d in dao.drivers_for_shift("night")] == ["Nora"]


def test_update_driver(dao):
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    driver.first_name = "Alicia"
    driver.last_name = "Smith"
    driver.phone_number = "phone-b"
    driver.id_number = "ID-2"
    dao.update(driver)
    assert dao.get(driver.id) == driver


def test_update_setting_moves_driver(dao, connection):
    first_tuk = _add_tuk(connection, "PLATE-A")
    second_tuk = _add_tuk(connection, "PLATE-B")
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    setting = _assign(dao, driver, first_tuk)
    setting.tuk_id = second_tuk
    setting.shift = "night"
    setting.start_date = date(2024, 3, 1)
    dao.update_setting(setting)
    stored = dao.get_setting(driver.id)
    assert (stored.tuk_number, stored.shift, stored.start_date) == (
        "PLATE-B",
        "night",
        date(2024, 3, 1),
    )


def test_retire_and_activate(dao, connection):
    tuk_id = _add_tuk(connection, "PLATE-A")
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    _assign(dao, driver, tuk_id)

    dao.retire(driver.id, date(2024, 4, 30))
    assert dao.get(driver.id).active is False
    end = connection.execute(
        "SELECT end_date FROM rickshaw_driver WHERE driver_id = ?", (driver.id,)
    ).fetchone()[0]
    assert end == "2024-04-30"

    dao.activate(driver.id)
    assert dao.get(driver.id).active is True
    end = connection.execute(
        "SELECT end_date FROM rickshaw_driver WHERE driver_id = ?", (driver.id,)
    ).fetchone()[0]
    assert end is None


def test_remove_cascades_to_setting(dao, connection):
    tuk_id = _add_tuk(connection, "PLATE-A")
    driver = _driver("Alice", "phone-a")
    dao.add(driver)
    _assign(dao, driver, tuk_id)
    dao.remove(driver.id)
    assert dao.get(driver.id) is None
    assert dao.get_setting(driver.id) is None
    assert dao.drivers() == []