"""Subtitle format handlers."""

from memojournal.formats.webvtt import parse_webvtt

__all__ = [
    "parse_webvtt",
]
