"""The fixed, ordered category registry."""

from __future__ import annotations

from .models import Category

CATEGORIES: tuple[Category, ...] = (
    Category(key="general", icon="apps", color="#7986CB"),
    Category(key="work", icon="work", color="#4FC3F7"),
    Category(key="personal", icon="person", color="#81C784"),
    Category(key="ai", icon="psychology", color="#FFD54F"),
    Category(key="prompt", icon="code", color="#FF8A65"),
)

DEFAULT_CATEGORY = CATEGORIES[0]


def category_keys() -> list[str]:
    """Return registry keys in display order."""
    return [c.key for c in CATEGORIES]


def resolve(key: str | None) -> Category:
    """Return the category for *key*, or the default (general) when unknown."""
    for category in CATEGORIES:
        if category.key == key:
            return category
    return DEFAULT_CATEGORY
