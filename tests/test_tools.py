"""Tests for MCP tool functions."""

import json

import pytest

from proomy_note.app import NotesApp
from proomy_note.store import OxigraphKeyValueStore
import proomy_note.server as srv


@pytest.fixture(autouse=True)
def temp_app(tmp_path):
    """Replace the global session with one on a temp store for each test."""
    app = NotesApp(OxigraphKeyValueStore(path=tmp_path / "test_db"))
    app.start()
    srv._app = app
    yield app
    srv._app = None


class TestNoteSave:
    def test_create(self):
        result = json.loads(srv.note_save("Buy milk", content="", category="personal"))
        assert result["ok"] is True
        assert result["note"]["id"]
        assert result["note"]["category"] == "personal"

    def test_edit(self):
        created = json.loads(srv.note_save("Buy milk", category="personal"))["note"]
        result = json.loads(srv.note_save("Buy oat milk", note_id=created["id"]))
        assert result["note"]["id"] == created["id"]
        listed = json.loads(srv.note_list())
        assert listed["count"] == 1
        assert listed["notes"][0]["title"] == "Buy oat milk"
        assert listed["notes"][0]["category"] == "personal"

    def test_blank_title(self):
        result = json.loads(srv.note_save("  "))
        assert result["ok"] is False
        assert result["error"]
        assert json.loads(srv.note_list())["count"] == 0


class TestNoteList:
    def test_query(self):
        srv.note_save("Buy milk", category="personal")
        assert json.loads(srv.note_list(query="MILK"))["count"] == 1
        assert json.loads(srv.note_list(query="xyz"))["notes"] == []

    def test_category(self):
        srv.note_save("Standup", category="work")
        srv.note_save("Prompt idea", category="prompt")
        result = json.loads(srv.note_list(category="prompt"))
        assert [n["title"] for n in result["notes"]] == ["Prompt idea"]
        assert result["notes"][0]["color"] == "#FF8A65"


class TestNoteGet:
    def test_found(self):
        note_id = json.loads(srv.note_save("Find me"))["note"]["id"]
        result = json.loads(srv.note_get(note_id))
        assert result["found"] is True
        assert result["note"]["icon"] == "apps"

    def test_missing(self):
        assert json.loads(srv.note_get("nope"))["found"] is False


class TestNoteDelete:
    def test_delete_existing(self):
        note_id = json.loads(srv.note_save("To delete"))["note"]["id"]
        result = json.loads(srv.note_delete(note_id))
        assert result == {"ok": True, "deleted": True}
        assert json.loads(srv.note_list())["count"] == 0

    def test_delete_nonexistent(self):
        assert json.loads(srv.note_delete("nope")) == {"ok": True, "deleted": False}


class TestCategories:
    def test_list(self):
        result = json.loads(srv.category_list())
        assert [c["key"] for c in result] == ["general", "work", "personal", "ai", "prompt"]
        assert result[2]["label"] == "Personal"


class TestLanguage:
    def test_get(self):
        result = json.loads(srv.language_get())
        assert result["language"] == "en"
        assert set(result["supported"]) == {"en", "ar"}

    def test_set(self):
        result = json.loads(srv.language_set("ar"))
        assert result["ok"] is True
        assert result["language"] == "ar"
        assert json.loads(srv.category_list())[0]["label"] == "عام"

    def test_set_unsupported(self):
        result = json.loads(srv.language_set("de"))
        assert result["ok"] is False
        assert result["supported"] == ["ar", "en"]

    def test_toggle(self):
        assert json.loads(srv.language_toggle())["language"] == "ar"
        assert json.loads(srv.language_toggle())["language"] == "en"


class TestInfo:
    def test_app_info(self):
        result = json.loads(srv.app_info())
        assert result["url"] == "https://github.com/zizwar/proomy-note"

    def test_info_follows_language(self):
        srv.language_set("ar")
        assert json.loads(srv.app_info())["privacy_policy_title"] == "سياسة الخصوصية"

    def test_resource(self):
        assert "Privacy Policy" in srv.info_resource()


class TestLazySession:
    def test_memory_backend_from_env(self, monkeypatch):
        monkeypatch.setenv("PROOMY_NOTE_STORE", "memory")
        srv._app = None
        result = json.loads(srv.note_list())
        assert result == {"language": "en", "count": 0, "notes": []}
