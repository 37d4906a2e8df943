"""Utility modules."""

from memojournal.utils.config import Settings, get_data_dir, get_settings
from memojournal.utils.logging import setup_logging

__all__ = [
    "Settings",
    "get_data_dir",
    "get_settings",
    "setup_logging",
]
