"""Voice-memo journal: WebVTT caption parsing and compaction."""

__version__ = "0.1.0"
