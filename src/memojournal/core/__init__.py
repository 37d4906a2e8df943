"""Core business logic modules."""

from memojournal.core.caption import (
    Caption,
    millis_to_timestamp,
    timestamp_to_millis,
    validate_captions,
)
from memojournal.core.compactor import compact_captions
from memojournal.core.errors import (
    CaptionValidationError,
    EntryFileError,
    InvalidEntryNameError,
    MalformedTimestampError,
    MemoJournalError,
)

__all__ = [
    "Caption",
    "CaptionValidationError",
    "EntryFileError",
    "InvalidEntryNameError",
    "MalformedTimestampError",
    "MemoJournalError",
    "compact_captions",
    "millis_to_timestamp",
    "timestamp_to_millis",
    "validate_captions",
]
