"""Translation dictionaries and the persisted language preference."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog
import yaml

from .errors import StorageError, UnsupportedLanguageError
from .models import StorageResult
from .store import KeyValueStore

LANGUAGE_KEY = "language"
DEFAULT_LANGUAGE = "en"

# Locale files bundled with the package, one per language code
_LOCALES_DIR = Path(__file__).resolve().parent / "locales"

logger = structlog.get_logger(__name__)


def get_locales_dir() -> Path:
    """Return the directory holding the bundled ``<code>.yaml`` locale files."""
    return _LOCALES_DIR


@lru_cache(maxsize=1)
def load_translations() -> dict[str, dict[str, Any]]:
    """Load every bundled locale file, keyed by language code."""
    locales: dict[str, dict[str, Any]] = {}
    for path in sorted(_LOCALES_DIR.glob("*.yaml")):
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        locales[path.stem] = {
            "meta": data.get("meta", {}),
            "strings": {str(k): str(v) for k, v in (data.get("strings") or {}).items()},
        }
    return locales


class Localizer:
    """Active display language, persisted under its own store key."""

    def __init__(
        self,
        store: KeyValueStore,
        translations: dict[str, dict[str, Any]] | None = None,
    ):
        self._store = store
        self._translations = translations if translations is not None else load_translations()
        if DEFAULT_LANGUAGE not in self._translations:
            raise ValueError(f"translations must include the default language '{DEFAULT_LANGUAGE}'")
        self._language = DEFAULT_LANGUAGE

    @property
    def language(self) -> str:
        return self._language

    @property
    def direction(self) -> str:
        """Text direction of the active language: ``ltr`` or ``rtl``."""
        return self._translations[self._language]["meta"].get("direction", "ltr")

    def supported_languages(self) -> list[str]:
        return sorted(self._translations)

    def language_names(self) -> dict[str, str]:
        return {
            code: locale["meta"].get("name", code)
            for code, locale in sorted(self._translations.items())
        }

    def load(self) -> str:
        """Restore the persisted language, falling back to the default."""
        try:
            code = self._store.get(LANGUAGE_KEY)
        except StorageError:
            logger.exception("language_load_failed", key=LANGUAGE_KEY)
            code = None

        if code and code not in self._translations:
            logger.warning("language_unsupported", language=code, fallback=DEFAULT_LANGUAGE)
            code = None

        self._language = code or DEFAULT_LANGUAGE
        return self._language

    def set_language(self, code: str) -> StorageResult:
        """Switch the active language and persist it.

        The switch holds for this session even when the write fails.
        """
        if code not in self._translations:
            raise UnsupportedLanguageError(code, self.supported_languages())

        self._language = code
        try:
            self._store.set(LANGUAGE_KEY, code)
        except StorageError as exc:
            logger.exception("language_save_failed", key=LANGUAGE_KEY, language=code)
            return StorageResult.failure(str(exc))

        logger.info("language_changed", language=code)
        return StorageResult()

    def toggle_language(self) -> StorageResult:
        """Advance to the next supported language (en <-> ar with two locales)."""
        codes = self.supported_languages()
        nxt = codes[(codes.index(self._language) + 1) % len(codes)]
        return self.set_language(nxt)

    def translate(self, key: str) -> str:
        """Display string for *key*: active language, then default, then the key."""
        strings = self._translations[self._language]["strings"]
        if key in strings:
            return strings[key]
        fallback = self._translations[DEFAULT_LANGUAGE]["strings"]
        return fallback.get(key, key)
