# tuktrack

Records and SQLite data access for bookkeeping of a small fleet of
auto-rickshaws (tuk-tuks):

- vehicles, with model, purchase date, phase and status
  (`active`, `in_maintenance` or `retired`);
- drivers, the vehicle and shift (`day` or `night`) each one works, and
  whether they are still active;
- the amount each driver is expected to deposit on each day of the week,
  and the deposits actually made;
- scheduled and performed maintenance jobs;
- revenue and maintenance cost totals by date range, by month, by vehicle
  and by maintenance type.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `tuktrack.records` | dataclasses `TukTuk`, `TukDriver`, `TukDriverSetting`, `DriverDeposit`, `DriverDepositSetting`; `weekday_number`, `weekday_name` |
| `tuktrack.maintenance` | dataclass `TukMaintenance` |
| `tuktrack.paths` | `app_data_path`, `database_path` |
| `tuktrack.tuktuk_dao` | `TukTukDao`: vehicles |
| `tuktrack.driver_dao` | `DriverDao`: drivers and their shift assignments |
| `tuktrack.deposit_dao` | `DepositDao`: expected and actual deposits, revenue totals |
| `tuktrack.deposit_settings` | `DepositSettingModel`: one driver's expected deposit per weekday |
| `tuktrack.maintenance_dao` | `MaintenanceDao`: maintenance jobs and cost totals |

Each data access class takes an open `sqlite3.Connection`. Methods that
insert a record set its `id` to the new row's id; lookups of a single record
return `None` when nothing matches.

### Weekdays

Weekdays are numbered from Monday = 1 to Sunday = 7; anything else raises
`ValueError`:

```python
from tuktrack.records import weekday_name, weekday_number

weekday_number("Monday")   # 1
weekday_name(7)            # "Sunday"
```

### Where the data lives

`app_data_path()` returns the per-user data directory of the application,
creating it if needed; `database_path(name="app.db")` returns the path of a
file inside it.

```python
from tuktrack.paths import database_path

print(database_path("tuktuk.db"))
```

### Example

```python
import sqlite3
from datetime import date

from tuktrack.deposit_dao import DepositDao
from tuktrack.driver_dao import DriverDao
from tuktrack.records import DriverDeposit, TukDriver, TukDriverSetting, TukTuk
from tuktrack.tuktuk_dao import TukTukDao

connection = sqlite3.connect("fleet.db")   # tables must already exist, see below

tuks = TukTukDao(connection)
tuk = TukTuk(registration_number="TEST-001", model="Demo", phase=1)
tuks.add(tuk)

drivers = DriverDao(connection)
driver = TukDriver(first_name="Ana", last_name="Example")
drivers.add(driver)
drivers.add_setting(
    TukDriverSetting(driver_id=driver.id, tuk_id=tuk.id, shift="day",
                     start_date=date(2024, 1, 1))
)

deposits = DepositDao(connection)
deposits.add(DriverDeposit(driver_id=driver.id, tuk_id=tuk.id,
                           date=date(2024, 1, 2), amount=30000))
deposits.total_revenue_between(date(2024, 1, 1), date(2024, 1, 31))  # 30000.0
```

Some details worth knowing:

- `DepositDao.expected_amount(driver_id, weekday)` returns `None` when no
  amount is set; `DepositSettingModel.expected_deposit_for(weekday)` returns
  `0.0` in that case.
- `DepositSettingModel.add_settings(driver_id, days_of_week, expected_amount)`
  updates the weekdays already set and adds the others, then reloads.
- `DriverDao.retire(driver_id, today=None)` marks a driver inactive and sets
  the end date of their assignments (today by default);
  `DriverDao.activate(driver_id)` reverses both.
- `MaintenanceDao.scheduled(tuk_id=None)` returns jobs with no performed date;
  `MaintenanceDao.past(tuk_id=None, today=None)` returns jobs performed on or
  before a day; `between(start, end)` returns jobs performed in a range,
  latest first.
- Monthly totals (`monthly_revenue_between`, `monthly_cost_between`) are
  `(YYYY-MM, total)` pairs in month order. Dates are stored as ISO strings.

## What the package does not do

- It does not create the database schema. The connection you pass must
  already hold the tables `rickshaw`, `driver`, `rickshaw_driver`,
  `driver_deposit_setting`, `driver_deposit` and `maintenance` with the
  columns the data access classes read and write. Whether deleting a vehicle
  or a driver also removes its related rows depends on the foreign keys of
  that schema.
- It has no command, no user interface and no list models for vehicles,
  drivers, deposits or maintenance beyond `DepositSettingModel`; it is a
  library of records and data access only.
- It does not reschedule recurring maintenance by itself: a `TukMaintenance`
  carries `recurring` and `recurrence_days`, and scheduling the next job is
  left to the caller.