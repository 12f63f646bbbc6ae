"""Note collection: in-memory copy mirrored to the key-value store.

Every mutation writes the whole serialized collection back under a single key;
there are no partial writes.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import replace

import structlog

from .categories import resolve
from .errors import NoteValidationError, StorageError
from .models import Note, StorageResult
from .store import KeyValueStore
from .utils import generate_note_id

NOTES_KEY = "notes"

logger = structlog.get_logger(__name__)


def encode_notes(notes: Iterable[Note]) -> str:
    """Serialize notes to the stored JSON array."""
    return json.dumps([n.to_dict() for n in notes], ensure_ascii=False)


def decode_notes(payload: str) -> list[Note]:
    """Parse the stored JSON array, skipping records that break invariants.

    Raises ValueError when the payload is not a JSON array.
    """
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")

    notes: list[Note] = []
    seen: set[str] = set()
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            logger.warning("note_record_skipped", index=index, reason="not_an_object")
            continue
        note = Note.from_dict(record)
        if not note.id or not note.is_valid():
            logger.warning("note_record_skipped", index=index, reason="missing_id_or_title")
            continue
        if note.id in seen:
            logger.warning("note_record_skipped", index=index, reason="duplicate_id", note_id=note.id)
            continue
        seen.add(note.id)
        notes.append(replace(note, category=resolve(note.category).key))
    return notes


class NoteRepository:
    """Owns the canonical in-memory note sequence for one store."""

    def __init__(
        self,
        store: KeyValueStore,
        id_factory: Callable[[Iterable[str]], str] = generate_note_id,
    ):
        self._store = store
        self._id_factory = id_factory
        self._notes: list[Note] = []

    @property
    def notes(self) -> list[Note]:
        return list(self._notes)

    def get(self, note_id: str) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def load(self) -> list[Note]:
        """Hydrate from the store. Failures leave an empty collection."""
        try:
            payload = self._store.get(NOTES_KEY)
        except StorageError:
            logger.exception("notes_load_failed", key=NOTES_KEY)
            self._notes = []
            return []

        if not payload:
            self._notes = []
            return []

        try:
            self._notes = decode_notes(payload)
        except (ValueError, RecursionError):
            logger.exception("notes_decode_failed", key=NOTES_KEY)
            self._notes = []
            return []

        logger.info("notes_loaded", count=len(self._notes))
        return self.notes

    def save(self, notes: Iterable[Note]) -> StorageResult:
        """Write the full collection, then adopt it as the in-memory copy.

        On a failed write the previous in-memory collection is kept.
        """
        notes = list(notes)
        try:
            self._store.set(NOTES_KEY, encode_notes(notes))
        except StorageError as exc:
            logger.exception("notes_save_failed", key=NOTES_KEY, count=len(notes))
            return StorageResult.failure(str(exc))

        self._notes = notes
        logger.debug("notes_saved", count=len(notes))
        return StorageResult()

    def upsert(self, note: Note) -> list[Note]:
        """Return the collection with *note* added or replaced by id.

        A note without an id gets a fresh one and is appended; a note whose id
        matches an entry replaces it in place.
        """
        if not note.is_valid():
            raise NoteValidationError("note title must not be empty")

        if not note.id:
            new_id = self._id_factory({n.id for n in self._notes})
            return [*self._notes, replace(note, id=new_id)]

        updated: list[Note] = []
        found = False
        for existing in self._notes:
            if existing.id == note.id:
                updated.append(note)
                found = True
            else:
                updated.append(existing)
        if not found:
            updated.append(note)
        return updated

    def remove(self, note_id: str) -> list[Note]:
        """Return the collection without the entry for *note_id* (no-op if absent)."""
        return [n for n in self._notes if n.id != note_id]

    def commit(self, note: Note) -> StorageResult:
        """Validate, upsert and save *note* in one step."""
        note = replace(note, category=resolve(note.category).key)
        try:
            notes = self.upsert(note)
        except NoteValidationError as exc:
            logger.info("note_rejected", reason=str(exc), note_id=note.id or None)
            return StorageResult.failure(str(exc))
        return self.save(notes)

    def delete(self, note_id: str) -> StorageResult:
        return self.save(self.remove(note_id))
