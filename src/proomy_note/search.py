"""Free-text and category filters over a note sequence.

All filters are pure and keep the input order.
"""

from __future__ import annotations

from collections.abc import Iterable

from .categories import resolve
from .models import Note


def filter_notes(notes: Iterable[Note], query: str) -> list[Note]:
    """Notes whose title or content contains *query*, case-insensitively."""
    needle = query.lower()
    return [n for n in notes if needle in n.title.lower() or needle in n.content.lower()]


def filter_by_category(notes: Iterable[Note], key: str | None) -> list[Note]:
    """Notes in category *key*; unknown note categories count as general."""
    if not key:
        return list(notes)
    return [n for n in notes if resolve(n.category).key == key]


def search(notes: Iterable[Note], query: str = "", category: str | None = None) -> list[Note]:
    return filter_notes(filter_by_category(notes, category), query)
