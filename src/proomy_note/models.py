"""Dataclasses for notes, categories, and storage outcomes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Note:
    title: str
    content: str = ""
    category: str = "general"
    id: str = ""  # empty until the note is first committed

    def is_valid(self) -> bool:
        return bool(self.title.strip())

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Note:
        """Build a Note from a stored record; missing text fields become empty."""
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            content=str(data.get("content") or ""),
            category=str(data.get("category") or ""),
        )


@dataclass(frozen=True)
class Category:
    """Fixed classification tag with a display icon and color."""
    key: str
    icon: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class StorageResult:
    """Outcome of an operation that writes to the store.

    ``error`` carries a message suitable for a dismissible notification.
    """
    ok: bool = True
    error: str | None = None

    @classmethod
    def failure(cls, error: str) -> StorageResult:
        return cls(ok=False, error=error)
