"""Key-value stores backing the note collection and the language preference."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import structlog
from pyoxigraph import DefaultGraph, Literal, NamedNode, Store

from .errors import StorageReadError, StorageWriteError
from .paths import get_db_path

PROOMY_NS = "http://proomy.app/note/"

_VALUE = NamedNode(f"{PROOMY_NS}value")

logger = structlog.get_logger(__name__)


class KeyValueStore(ABC):
    """Durable string-to-string storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored text for *key*, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""


class MemoryKeyValueStore(KeyValueStore):
    """Process-local store; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class OxigraphKeyValueStore(KeyValueStore):
    """Persistent key-value store on top of an on-disk Oxigraph store.

    Each key maps to the subject ``<ns>kv/<key>`` with a single ``<ns>value``
    literal in the default graph.
    """

    def __init__(self, path: Path | None = None):
        db_path = path or get_db_path()
        self._store = Store(str(db_path))
        logger.debug("store_opened", path=str(db_path))

    def get(self, key: str) -> str | None:
        try:
            quads = list(self._store.quads_for_pattern(_subject(key), _VALUE, None, DefaultGraph()))
        except (OSError, RuntimeError, ValueError) as exc:
            raise StorageReadError(key) from exc
        if not quads:
            return None
        return quads[0].object.value

    def set(self, key: str, value: str) -> None:
        """Replace the value in one update; a failed write keeps the old value."""
        subject = _subject(key)
        update = (
            f"DELETE WHERE {{ {subject} {_VALUE} ?o }} ; "
            f"INSERT DATA {{ {subject} {_VALUE} {Literal(value)} }}"
        )
        try:
            self._store.update(update)
        except (OSError, RuntimeError, ValueError) as exc:
            raise StorageWriteError(key) from exc

    def keys(self) -> list[str]:
        """Return all stored keys, sorted."""
        prefix = f"{PROOMY_NS}kv/"
        return sorted(
            q.subject.value[len(prefix):]
            for q in self._store.quads_for_pattern(None, _VALUE, None, DefaultGraph())
            if q.subject.value.startswith(prefix)
        )

    def flush(self) -> None:
        """Flush pending writes to disk."""
        self._store.flush()


def _subject(key: str) -> NamedNode:
    return NamedNode(f"{PROOMY_NS}kv/{key}")


def open_store(backend: str = "oxigraph", path: Path | None = None) -> KeyValueStore:
    """Return a store for the configured backend name."""
    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "oxigraph":
        return OxigraphKeyValueStore(path=path)
    raise ValueError(f"Unsupported store backend: {backend}. Supported: ['oxigraph', 'memory']")
