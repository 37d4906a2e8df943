"""Collapse consecutive captions that repeat the same text."""

from collections.abc import Iterable
from dataclasses import replace

from memojournal.core.caption import Caption


def compact_captions(captions: Iterable[Caption]) -> list[Caption]:
    """Merge runs of consecutive captions with identical text.

    Args:
        captions: Captions in document order

    Returns:
        New list where each run of equal-text neighbours is a single caption
        spanning from the run's first start time to its last end time

    Notes:
        - Text comparison is exact (case and whitespace sensitive)
        - Only adjacent captions merge; "x", "y", "x" stays three captions
        - Input captions are never modified
    """
    compacted: list[Caption] = []
    current: Caption | None = None

    for caption in captions:
        if current is not None and caption.text == current.text:
            current = replace(current, end_time=caption.end_time)
            compacted[-1] = current
        else:
            current = replace(caption)
            compacted.append(current)

    return compacted
