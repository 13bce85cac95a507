"""Shared fixtures for transcript-pdf tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from tests.helpers import deposition_pdf

_ENV_VARS = (
    "LOG_LEVEL",
    "RULER_MIN_WIDTH",
    "RULER_MIN_HEIGHT",
    "SPEAKER_MAX_INDENT",
    "TRANSCRIPT_PAGE_PREFIX",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all transcript-pdf environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("transcript_pdf.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture()
def deposition_file(tmp_path: Path) -> Path:
    """A labelled transcript PDF on disk (see :func:`tests.helpers.deposition_pdf`)."""
    path = tmp_path / "deposition.pdf"
    path.write_bytes(deposition_pdf())
    return path
