"""Records and SQLite data access for auto-rickshaw fleet bookkeeping: vehicles, drivers, deposits and maintenance."""

__version__ = "0.1.0"