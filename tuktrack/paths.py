"""Locations of the application's data files."""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

_ORGANIZATION = "iroot"
_APPLICATION = "TukTrack"


def app_data_path() -> Path:
    """Return the writable data directory of the application, creating it if needed."""
    location = Path(platformdirs.user_data_dir(_APPLICATION, _ORGANIZATION))
    location.mkdir(parents=True, exist_ok=True)
    return location


def database_path(database_name: str = "app.db") -> Path:
    """Return the normalised path of a database file inside the data directory."""
    return Path(os.path.normpath(app_data_path() / database_name))