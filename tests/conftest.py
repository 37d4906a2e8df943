"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest
import structlog


@pytest.fixture
def sample_webvtt_content() -> str:
    """Return sample WebVTT content with a repeated caption."""
    return """WEBVTT

00:00:00.000 --> 00:00:02.000
Hello

00:00:02.000 --> 00:00:04.000
Hello

00:00:04.000 --> 00:00:06.000
World
"""


@pytest.fixture
def make_entry_dir(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that creates an entry directory with optional files."""

    def _make(
        name: str = "20240305094100",
        *,
        vtt: str | None = None,
        md: str | None = None,
        mp3: bytes | None = None,
        root: Path | None = None,
    ) -> Path:
        entry_dir = (root or tmp_path) / name
        entry_dir.mkdir(parents=True)
        if vtt is not None:
            (entry_dir / f"{name}.vtt").write_text(vtt, encoding="utf-8")
        if md is not None:
            (entry_dir / f"{name}.md").write_text(md, encoding="utf-8")
        if mp3 is not None:
            (entry_dir / f"{name}.mp3").write_bytes(mp3)
        return entry_dir

    return _make


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()
