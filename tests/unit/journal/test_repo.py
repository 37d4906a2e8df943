"""Unit tests for the data repository."""

import pytest

from memojournal.journal.entry import Entry
from memojournal.journal.repo import DataRepo
from memojournal.utils.config import get_settings


class TestDataRepo:
    """Test DataRepo.list_entries."""

    def test_lists_entries_newest_first(self, tmp_path, make_entry_dir):
        """Test that entries are sorted by path descending."""
        for name in ["20240101080000", "20240301080000", "20240201080000"]:
            make_entry_dir(name)

        result = DataRepo(tmp_path).list_entries()

        assert [e.basename for e in result] == [
            "20240301080000",
            "20240201080000",
            "20240101080000",
        ]
        assert all(isinstance(e, Entry) for e in result)

    def test_ignores_plain_files(self, tmp_path, make_entry_dir):
        """Test that files directly under the data dir are skipped."""
        make_entry_dir("20240101080000")
        (tmp_path / "notes.txt").write_text("x", encoding="utf-8")

        result = DataRepo(tmp_path).list_entries()

        assert [e.basename for e in result] == ["20240101080000"]

    def test_creates_missing_data_dir(self, tmp_path):
        """Test that a missing data directory is created and yields no entries."""
        data_dir = tmp_path / "nested" / "data"

        result = DataRepo(data_dir).list_entries()

        assert result == []
        assert data_dir.is_dir()


class TestFromSettings:
    """Test DataRepo.from_settings."""

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        """Clear settings cache before and after each test."""
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_uses_configured_data_dir(self, tmp_path, monkeypatch):
        """Should read MEMOJOURNAL_DATA_DIR."""
        monkeypatch.setenv("MEMOJOURNAL_DATA_DIR", str(tmp_path))

        repo = DataRepo.from_settings()

        assert repo.data_dir == tmp_path
