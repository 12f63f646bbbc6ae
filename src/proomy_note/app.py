"""Session state for one user: the note list screen and its dialogs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from .categories import CATEGORIES, resolve
from .i18n import Localizer
from .models import Note
from .repository import NoteRepository
from .search import search
from .store import KeyValueStore

PROJECT_URL = "https://github.com/zizwar/proomy-note"

logger = structlog.get_logger(__name__)


@dataclass
class Outcome:
    """Result of a user action; ``error`` is a translated notification."""
    ok: bool
    note: Note | None = None
    error: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"ok": self.ok}
        if self.note is not None:
            result["note"] = self.note.to_dict()
        if self.error:
            result["error"] = self.error
        result.update(self.data)
        return result


class NotesApp:
    """Wires the repository and localizer to a single store."""

    def __init__(self, store: KeyValueStore, localizer: Localizer | None = None):
        self.store = store
        self.repository = NoteRepository(store)
        self.localizer = localizer or Localizer(store)

    def start(self) -> None:
        """Hydrate notes and language from the store."""
        self.repository.load()
        self.localizer.load()
        logger.info(
            "session_started",
            notes=len(self.repository.notes),
            language=self.localizer.language,
        )

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def visible_notes(self, query: str = "", category: str | None = None) -> list[dict[str, Any]]:
        """Filtered notes, each decorated with its category display data."""
        return [self.present(n) for n in search(self.repository.notes, query, category)]

    def present(self, note: Note) -> dict[str, Any]:
        category = resolve(note.category)
        return {
            **note.to_dict(),
            "category_label": self.localizer.translate(category.key),
            "icon": category.icon,
            "color": category.color,
        }

    def save_note(
        self,
        title: str,
        content: str | None = None,
        category: str | None = None,
        note_id: str = "",
    ) -> Outcome:
        """Create (empty *note_id*) or edit a note, as the editor's save button.

        When editing, omitted content and category keep their current values.
        """
        existing = self.repository.get(note_id) if note_id else None
        if existing is not None:
            content = existing.content if content is None else content
            category = existing.category if category is None else category
        note = Note(title=title, content=content or "", category=resolve(category).key, id=note_id)
        if not note.is_valid():
            return Outcome(ok=False, error=self.localizer.translate("titleRequired"))

        result = self.repository.commit(note)
        if not result.ok:
            return Outcome(ok=False, error=self.localizer.translate("saveFailed"))

        saved = self.repository.get(note_id) if note_id else self.repository.notes[-1]
        return Outcome(ok=True, note=saved)

    def delete_note(self, note_id: str) -> Outcome:
        existed = self.repository.get(note_id) is not None
        result = self.repository.delete(note_id)
        if not result.ok:
            return Outcome(ok=False, error=self.localizer.translate("deleteFailed"))
        return Outcome(ok=True, data={"deleted": existed})

    # ------------------------------------------------------------------
    # Categories and language
    # ------------------------------------------------------------------

    def categories(self) -> list[dict[str, str]]:
        return [
            {**c.to_dict(), "label": self.localizer.translate(c.key)}
            for c in CATEGORIES
        ]

    def change_language(self, code: str) -> Outcome:
        """Switch language; raises UnsupportedLanguageError for unknown codes."""
        result = self.localizer.set_language(code)
        return self._language_outcome(result.ok)

    def toggle_language(self) -> Outcome:
        result = self.localizer.toggle_language()
        return self._language_outcome(result.ok)

    def _language_outcome(self, ok: bool) -> Outcome:
        data = {
            "language": self.localizer.language,
            "direction": self.localizer.direction,
        }
        if ok:
            return Outcome(ok=True, data=data)
        return Outcome(ok=False, error=self.localizer.translate("languageSaveFailed"), data=data)

    # ------------------------------------------------------------------
    # Info dialog
    # ------------------------------------------------------------------

    def info(self) -> dict[str, str]:
        t = self.localizer.translate
        return {
            "app_name": t("appName"),
            "privacy_policy_title": t("privacyPolicy"),
            "privacy_policy": t("privacyPolicyText"),
            "terms_title": t("termsAndConditions"),
            "terms": t("termsAndConditionsText"),
            "open_source_title": t("openSource"),
            "open_source": t("openSourceInfo"),
            "link_label": t("viewOnGitHub"),
            "url": PROJECT_URL,
        }

    def info_markdown(self) -> str:
        info = self.info()
        return (
            f"# {info['app_name']}\n\n"
            f"## {info['privacy_policy_title']}\n\n{info['privacy_policy']}\n\n"
            f"## {info['terms_title']}\n\n{info['terms']}\n\n"
            f"## {info['open_source_title']}\n\n{info['open_source']}\n\n"
            f"[{info['link_label']}]({info['url']})\n"
        )
