"""Listing of journal entries in the data directory."""

from pathlib import Path

import structlog

from memojournal.journal.entry import Entry
from memojournal.utils.config import get_data_dir

logger = structlog.get_logger()


class DataRepo:
    """Data directory containing one sub-directory per entry."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    @classmethod
    def from_settings(cls) -> "DataRepo":
        return cls(get_data_dir())

    def list_entries(self) -> list[Entry]:
        """Return entries sorted newest first.

        The data directory is created when missing. Plain files directly in
        the data directory are ignored.
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)
        entries = [Entry(child) for child in self.data_dir.iterdir() if child.is_dir()]
        entries.sort(key=lambda entry: str(entry.path), reverse=True)
        logger.info("entries_listed", data_dir=str(self.data_dir), count=len(entries))
        return entries
