"""Journal entry: a directory holding a recording, its transcript and summary."""

import re
import shutil
from datetime import datetime
from pathlib import Path

import structlog

from memojournal.core.caption import Caption
from memojournal.core.compactor import compact_captions
from memojournal.core.errors import EntryFileError, InvalidEntryNameError
from memojournal.formats.webvtt import parse_webvtt

logger = structlog.get_logger()

_ENTRY_NAME = re.compile(r"\d{14}")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def read_text(path: Path) -> str:
    """Load a UTF-8 text file belonging to an entry.

    Raises:
        EntryFileError: If the file does not exist
    """
    if not path.is_file():
        raise EntryFileError(path)
    return path.read_text(encoding="utf-8")


class Entry:
    """Journal entry stored as ``<dir>/<basename>.{mp3,vtt,md}``.

    The directory name doubles as the file stem and is expected to be a
    ``YYYYMMDDHHMMSS`` recording timestamp.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"Entry(path={str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def basename(self) -> str:
        return self.path.name

    def build_path(self, ext: str) -> Path:
        return self.path / f"{self.basename}.{ext}"

    @property
    def md_path(self) -> Path:
        return self.build_path("md")

    @property
    def mp3_path(self) -> Path:
        return self.build_path("mp3")

    @property
    def vtt_path(self) -> Path:
        return self.build_path("vtt")

    def has_mp3(self) -> bool:
        return self.mp3_path.is_file()

    def has_vtt(self) -> bool:
        return self.vtt_path.is_file()

    def has_md(self) -> bool:
        return self.md_path.is_file()

    def read_captions(self, *, compact: bool = False) -> list[Caption]:
        """Load and parse the entry's WebVTT transcript.

        Args:
            compact: Merge consecutive captions with identical text

        Returns:
            Captions in document order

        Raises:
            EntryFileError: If the entry has no transcript file
        """
        captions = parse_webvtt(read_text(self.vtt_path))
        if compact:
            captions = compact_captions(captions)
        logger.debug(
            "captions_loaded",
            entry=self.basename,
            count=len(captions),
            compact=compact,
        )
        return captions

    def read_summary(self) -> str | None:
        """Return the Markdown summary, or None when the entry has none yet."""
        if not self.has_md():
            return None
        return read_text(self.md_path)

    def save_summary(self, summary: str) -> None:
        self.md_path.write_text(summary, encoding="utf-8")
        logger.info("summary_saved", entry=self.basename, chars=len(summary))

    def recorded_at(self) -> datetime:
        """Parse the recording time from the directory name.

        Raises:
            InvalidEntryNameError: If the name is not a valid YYYYMMDDHHMMSS
                timestamp
        """
        if not _ENTRY_NAME.fullmatch(self.basename):
            raise InvalidEntryNameError(self.basename)
        try:
            return datetime.strptime(self.basename, "%Y%m%d%H%M%S")
        except ValueError as e:
            raise InvalidEntryNameError(self.basename) from e

    def title(self) -> str:
        """Human-readable title such as ``2024-03-05(Tue) 09:41``."""
        recorded = self.recorded_at()
        weekday = _WEEKDAYS[recorded.weekday()]
        return f"{recorded:%Y-%m-%d}({weekday}) {recorded:%H:%M}"

    def remove(self) -> None:
        """Delete the entry directory and everything in it."""
        shutil.rmtree(self.path)
        logger.info("entry_removed", entry=self.basename)
