"""Journal entries stored on disk."""

from memojournal.journal.entry import Entry, read_text
from memojournal.journal.repo import DataRepo

__all__ = [
    "DataRepo",
    "Entry",
    "read_text",
]
