"""XDG-compliant path resolution for proomy-note data storage."""

import os
from pathlib import Path

from platformdirs import user_data_dir


def get_data_dir() -> Path:
    """Return the data directory (PROOMY_NOTE_HOME or the platform default)."""
    if env_home := os.environ.get("PROOMY_NOTE_HOME"):
        path = Path(env_home)
    else:
        path = Path(user_data_dir("proomy-note"))
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_db_path() -> Path:
    """Return the path to the Oxigraph persistent store directory."""
    path = get_data_dir() / "oxigraph"
    path.mkdir(parents=True, exist_ok=True)
    return path
