"""
Unit tests for session_store module
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.leasify.client.session_store import FileTokenStorage, MemoryTokenStorage, SessionStore


class TestFileTokenStorage:
    """Tests for the durable token slot"""

    def test_read_missing_file_returns_none(self, tmp_path):
        storage = FileTokenStorage(tmp_path / "token")
        assert storage.read() is None

    def test_write_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "token"
        storage = FileTokenStorage(path)

        storage.write("abc")

        assert path.read_text(encoding="utf-8") == "abc"
        assert storage.read() == "abc"

    def test_read_strips_whitespace_and_ignores_empty_file(self, tmp_path):
        path = tmp_path / "token"
        path.write_text("  abc\n", encoding="utf-8")
        assert FileTokenStorage(path).read() == "abc"

        path.write_text("\n", encoding="utf-8")
        assert FileTokenStorage(path).read() is None

    def test_delete_is_safe_when_missing(self, tmp_path):
        storage = FileTokenStorage(tmp_path / "token")
        storage.delete()
        assert storage.read() is None


class TestSessionStore:
    """Tests for SessionStore"""

    def test_empty_storage_means_no_session(self):
        store = SessionStore(MemoryTokenStorage())
        assert store.token is None
        assert not store.is_present()

    def test_restores_token_on_construction(self, tmp_path):
        path = tmp_path / "token"
        path.write_text("saved", encoding="utf-8")

        store = SessionStore(FileTokenStorage(path))

        assert store.is_present()
        assert store.token == "saved"

    def test_save_overwrites_single_slot(self, tmp_path):
        path = tmp_path / "token"
        store = SessionStore(FileTokenStorage(path))

        store.save("first")
        store.save("second")

        assert store.token == "second"
        assert path.read_text(encoding="utf-8") == "second"

    def test_save_survives_restart(self, tmp_path):
        path = tmp_path / "token"
        SessionStore(FileTokenStorage(path)).save("abc")

        restored = SessionStore(FileTokenStorage(path))

        assert restored.token == "abc"

    def test_clear_removes_memory_and_storage(self, tmp_path):
        path = tmp_path / "token"
        store = SessionStore(FileTokenStorage(path))
        store.save("abc")

        store.clear()

        assert not store.is_present()
        assert not path.exists()
        assert SessionStore(FileTokenStorage(path)).token is None

    def test_load_rereads_storage(self):
        storage = MemoryTokenStorage()
        store = SessionStore(storage)
        storage.write("external")

        assert store.load() == "external"
        assert store.is_present()
