"""Error hierarchy for journal entries and captions."""


class MemoJournalError(Exception):
    """Base error with a machine-readable code and a human message."""

    def __init__(self, *, code: str, message: str, detail: str | None = None) -> None:
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class MalformedTimestampError(MemoJournalError):
    """Raised when a timestamp is not in ``HH:MM:SS.mmm`` form."""

    def __init__(self, value: str, *, detail: str | None = None) -> None:
        self.value = value
        super().__init__(
            code="malformed_timestamp",
            message=f"Malformed timestamp {value!r}, expected 'HH:MM:SS.mmm'",
            detail=detail,
        )


class CaptionValidationError(MemoJournalError):
    """Raised by strict caption validation."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        self.position = position
        super().__init__(code="invalid_caption", message=message)


class EntryFileError(MemoJournalError):
    """Raised when a file belonging to an entry does not exist."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(
            code="entry_file_missing",
            message=f"Entry file does not exist: {path}",
        )


class InvalidEntryNameError(MemoJournalError):
    """Raised when an entry directory name is not a YYYYMMDDHHMMSS timestamp."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            code="invalid_entry_name",
            message=f"Invalid entry name {name!r}, expected 'YYYYMMDDHHMMSS'",
        )
