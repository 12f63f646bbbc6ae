"""Runtime settings, read from the environment.

Variables:
- PROOMY_NOTE_STORE: ``oxigraph`` (on-disk) or ``memory``
- PROOMY_NOTE_LOG_LEVEL: stdlib level name, default ``INFO``
- PROOMY_NOTE_LOG_FORMAT: ``console`` or ``json``

The data directory (PROOMY_NOTE_HOME) is resolved in :mod:`paths`.
"""

import os
from dataclasses import dataclass

_STORE_BACKENDS = ("oxigraph", "memory")
_LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    store_backend: str = "oxigraph"
    log_level: str = "INFO"
    log_format: str = "console"


def load_settings() -> Settings:
    """Build Settings from environment variables, validating enumerated values."""
    store_backend = os.getenv("PROOMY_NOTE_STORE", "oxigraph").lower().strip()
    if store_backend not in _STORE_BACKENDS:
        raise ValueError(
            f"Unsupported store backend: {store_backend}. Supported: {list(_STORE_BACKENDS)}"
        )

    log_format = os.getenv("PROOMY_NOTE_LOG_FORMAT", "console").lower().strip()
    if log_format not in _LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {log_format}. Supported: {list(_LOG_FORMATS)}")

    return Settings(
        store_backend=store_backend,
        log_level=os.getenv("PROOMY_NOTE_LOG_LEVEL", "INFO").upper(),
        log_format=log_format,
    )
