"""FastMCP server exposing the note screen as tools."""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from .app import NotesApp
from .config import load_settings
from .errors import UnsupportedLanguageError
from .logging_config import configure_logging
from .store import open_store

mcp = FastMCP("proomy-note")

_app: NotesApp | None = None


def _get_app() -> NotesApp:
    global _app
    if _app is None:
        settings = load_settings()
        store = open_store(settings.store_backend)
        _app = NotesApp(store)
        _app.start()
    return _app


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------
@mcp.tool()
def note_list(query: str = "", category: str | None = None) -> str:
    """
    List notes, optionally narrowed by free text and category.

    Args:
        query: Case-insensitive text matched against title and content
        category: One of general, work, personal, ai, prompt

    Returns:
        str: JSON with the language and the matching notes in insertion order
    """
    app = _get_app()
    notes = app.visible_notes(query=query, category=category)
    return json.dumps({
        "language": app.localizer.language,
        "count": len(notes),
        "notes": notes,
    }, ensure_ascii=False)


@mcp.tool()
def note_get(note_id: str) -> str:
    """
    Fetch a single note for editing.

    Args:
        note_id: The note id

    Returns:
        str: JSON with the note, or found=false
    """
    app = _get_app()
    note = app.repository.get(note_id)
    if note is None:
        return json.dumps({"found": False, "id": note_id})
    return json.dumps({"found": True, "note": app.present(note)}, ensure_ascii=False)


@mcp.tool()
def note_save(
    title: str,
    content: str | None = None,
    category: str | None = None,
    note_id: str = "",
) -> str:
    """
    Create a note, or update one when note_id is given.

    Args:
        title: Note title, must not be blank
        content: Free text body
        category: One of general, work, personal, ai, prompt (unknown → general)
        note_id: Id of the note to edit; empty creates a new note

    Returns:
        str: JSON with ok, the saved note, or a translated error message
    """
    app = _get_app()
    outcome = app.save_note(title=title, content=content, category=category, note_id=note_id)
    return json.dumps(outcome.to_dict(), ensure_ascii=False)


@mcp.tool()
def note_delete(note_id: str) -> str:
    """
    Delete a note by id. Unknown ids are accepted and change nothing.

    Args:
        note_id: The note id

    Returns:
        str: JSON with ok and whether a note was removed
    """
    app = _get_app()
    return json.dumps(app.delete_note(note_id).to_dict(), ensure_ascii=False)


# ---------------------------------------------------------------------------
# Categories and language
# ---------------------------------------------------------------------------
@mcp.tool()
def category_list() -> str:
    """
    List the fixed categories with icon, color and translated label.

    Returns:
        str: JSON array of categories in display order
    """
    return json.dumps(_get_app().categories(), ensure_ascii=False)


@mcp.tool()
def language_get() -> str:
    """
    Return the active language and the supported ones.

    Returns:
        str: JSON with language, direction and supported language names
    """
    localizer = _get_app().localizer
    return json.dumps({
        "language": localizer.language,
        "direction": localizer.direction,
        "supported": localizer.language_names(),
    }, ensure_ascii=False)


@mcp.tool()
def language_set(code: str) -> str:
    """
    Switch the interface language and remember it.

    Args:
        code: Two-letter language code (en, ar)

    Returns:
        str: JSON with ok and the active language
    """
    app = _get_app()
    try:
        outcome = app.change_language(code)
    except UnsupportedLanguageError as e:
        return json.dumps({"ok": False, "error": str(e), "supported": e.supported})
    return json.dumps(outcome.to_dict(), ensure_ascii=False)


@mcp.tool()
def language_toggle() -> str:
    """
    Switch to the next supported language (English ↔ Arabic).

    Returns:
        str: JSON with ok and the active language
    """
    return json.dumps(_get_app().toggle_language().to_dict(), ensure_ascii=False)


# ---------------------------------------------------------------------------
# Info
# ---------------------------------------------------------------------------
@mcp.tool()
def app_info() -> str:
    """
    Privacy policy, terms and open-source information in the active language.

    Returns:
        str: JSON with the info texts and the project URL
    """
    return json.dumps(_get_app().info(), ensure_ascii=False)


@mcp.resource(
    "proomy://info",
    name="app-info",
    title="Proomy Note information",
    description="Privacy policy, terms and conditions, and open-source information.",
    mime_type="text/markdown",
)
def info_resource() -> str:
    """Return the info dialog as markdown."""
    return _get_app().info_markdown()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main():
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_format)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
