"""WebVTT transcript parser."""

import re

import structlog

from memojournal.core.caption import Caption

logger = structlog.get_logger()

TIMING_PATTERN = re.compile(
    r"(\d{2}:\d{2}:\d{2}\.\d{3}) --> (\d{2}:\d{2}:\d{2}\.\d{3})", re.ASCII
)
HEADER = "WEBVTT"


class _CueState:
    """Scan state: times of the current cue and the text collected so far."""

    def __init__(self) -> None:
        self.start_time = ""
        self.end_time = ""
        self.text = ""

    def set_times(self, start_time: str, end_time: str) -> None:
        self.start_time = start_time
        self.end_time = end_time

    def append_text(self, line: str) -> None:
        if self.text:
            self.text += "\n"
        self.text += line.strip()

    def has_text(self) -> bool:
        return self.text != ""

    def flush(self) -> Caption:
        # Times carry over; the next timing line overwrites them.
        caption = Caption(self.start_time, self.end_time, self.text)
        self.text = ""
        return caption


def parse_webvtt(content: str) -> list[Caption]:
    """Parse a WebVTT document into captions.

    The scan is permissive: it never raises on malformed input. Lines that
    do not match the timing pattern are treated as text, cues without text
    are dropped, and timestamps are neither range-checked nor required to
    increase.

    Args:
        content: Full text of the subtitle document

    Returns:
        Captions in document order, one per cue block that has text
    """
    captions: list[Caption] = []
    state = _CueState()

    for raw_line in content.split("\n"):
        line = raw_line.removesuffix("\r")
        match = TIMING_PATTERN.search(line)
        if match:
            state.set_times(match.group(1), match.group(2))
        elif line != "" and line != HEADER:
            state.append_text(line)
        elif line == "" and state.has_text():
            captions.append(state.flush())

    # Last cue may not be followed by a blank line
    if state.has_text():
        captions.append(state.flush())

    logger.debug("webvtt_parsed", captions=len(captions))
    return captions
