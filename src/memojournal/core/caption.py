"""Caption domain model and timestamp conversion."""

import re
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from memojournal.core.errors import CaptionValidationError, MalformedTimestampError

_STRICT_TIMESTAMP = re.compile(r"(\d{2,}):(\d{2}):(\d{2})\.(\d{3})", re.ASCII)


@dataclass(frozen=True)
class Caption:
    """Single timed caption.

    Times are kept as the raw ``HH:MM:SS.mmm`` strings found in the source
    document and are converted to milliseconds on demand.
    """

    start_time: str
    end_time: str
    text: str

    @property
    def start_millis(self) -> int:
        """Start offset in milliseconds."""
        return timestamp_to_millis(self.start_time)

    @property
    def end_millis(self) -> int:
        """End offset in milliseconds."""
        return timestamp_to_millis(self.end_time)

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-serializable mapping of the caption fields."""
        return asdict(self)

    def __str__(self) -> str:
        return f"start: {self.start_time}, end: {self.end_time}, text: {self.text}"


def _parse_field(value: str, field: str) -> int:
    if not (field.isascii() and field.isdigit()):
        raise MalformedTimestampError(value, detail=f"non-numeric field {field!r}")
    return int(field)


def timestamp_to_millis(value: str) -> int:
    """Convert an ``HH:MM:SS.mmm`` timestamp into milliseconds.

    Fields are parsed positionally as base-10 integers. Component ranges are
    not checked, so ``"00:99:99.999"`` converts without error.

    Args:
        value: Timestamp string

    Returns:
        Offset in milliseconds

    Raises:
        MalformedTimestampError: If the field count is wrong or a field is
            not numeric
    """
    parts = value.split(":")
    if len(parts) != 3:
        raise MalformedTimestampError(
            value, detail=f"expected 3 ':'-separated fields, got {len(parts)}"
        )
    second_parts = parts[2].split(".")
    if len(second_parts) != 2:
        raise MalformedTimestampError(value, detail="missing '.' before milliseconds")

    hours = _parse_field(value, parts[0])
    minutes = _parse_field(value, parts[1])
    seconds = _parse_field(value, second_parts[0])
    millis = _parse_field(value, second_parts[1])
    return millis + seconds * 1000 + minutes * 60_000 + hours * 3_600_000


def millis_to_timestamp(millis: int) -> str:
    """Format a millisecond offset as ``HH:MM:SS.mmm``.

    Hours are zero-padded to two digits and grow wider past 99 hours.

    Raises:
        ValueError: If millis is negative
    """
    if millis < 0:
        raise ValueError(f"Offset must be non-negative, got {millis}")
    total_seconds, ms = divmod(millis, 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


def _validate_timestamp(value: str, *, position: int, label: str) -> int:
    match = _STRICT_TIMESTAMP.fullmatch(value)
    if not match:
        raise CaptionValidationError(
            f"Caption {position}: {label} {value!r} is not 'HH:MM:SS.mmm'",
            position=position,
        )
    minutes, seconds = int(match.group(2)), int(match.group(3))
    if minutes > 59 or seconds > 59:
        raise CaptionValidationError(
            f"Caption {position}: {label} {value!r} has minutes or seconds "
            "out of range",
            position=position,
        )
    return timestamp_to_millis(value)


def validate_captions(captions: Iterable[Caption]) -> None:
    """Strictly validate captions produced by the permissive parser.

    Checks that both timestamps are canonical, that minutes and seconds are
    within 0-59, and that no caption ends before it starts. Parsing never
    calls this; it is an opt-in check for callers that want to reject
    garbled transcripts.

    Args:
        captions: Captions to check

    Raises:
        CaptionValidationError: On the first invalid caption (positions are
            1-based)
    """
    for position, caption in enumerate(captions, start=1):
        start = _validate_timestamp(
            caption.start_time, position=position, label="start time"
        )
        end = _validate_timestamp(caption.end_time, position=position, label="end time")
        if end < start:
            raise CaptionValidationError(
                f"Caption {position}: end time {caption.end_time} is before "
                f"start time {caption.start_time}",
                position=position,
            )
        if not caption.text.strip():
            raise CaptionValidationError(
                f"Caption {position}: text cannot be empty or whitespace-only",
                position=position,
            )
