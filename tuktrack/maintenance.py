"""The maintenance record of a tuk-tuk."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class TukMaintenance:
    """A maintenance job, scheduled or already performed, on one tuk-tuk.

    A job whose ``performed_date`` is ``None`` is still to be done.
    """

    id: int = -1
    tuk_id: int = -1
    tuk_number: str = ""
    maintenance_type: str = ""
    description: str = ""
    scheduled_date: Optional[date] = None
    performed_date: Optional[date] = None
    recurring: bool = False
    recurrence_days: int = 0
    cost: float = 0.0