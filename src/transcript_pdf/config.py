"""Configuration loading for transcript-pdf.

Reads settings from environment variables (with .env support via
python-dotenv).  Every setting has a default, so an empty environment is
valid; values that are present must parse.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from transcript_pdf.classifier import ClassifierOptions
from transcript_pdf.extraction import DEFAULT_TRANSCRIPT_PREFIX


class ConfigError(Exception):
    """Raised when a configuration value is present but invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        ruler_min_width: Minimum ruler width, exclusive (default ``100``).
        ruler_min_height: Minimum ruler height, exclusive (default ``1``).
        speaker_max_indent: Maximum indentation of a speaker label
            relative to the left margin (default ``20``).
        transcript_page_prefix: Page-label prefix of the first transcript
            page (default ``"T"``).
    """

    log_level: str = "INFO"
    ruler_min_width: float = 100.0
    ruler_min_height: float = 1.0
    speaker_max_indent: float = 20.0
    transcript_page_prefix: str = DEFAULT_TRANSCRIPT_PREFIX

    def classifier_options(self) -> ClassifierOptions:
        return ClassifierOptions(
            ruler_min_width=self.ruler_min_width,
            ruler_min_height=self.ruler_min_height,
            speaker_max_indent=self.speaker_max_indent,
        )


_NUMERIC_VARS = {
    "RULER_MIN_WIDTH": "ruler_min_width",
    "RULER_MIN_HEIGHT": "ruler_min_height",
    "SPEAKER_MAX_INDENT": "speaker_max_indent",
}


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If a numeric variable is not a non-negative number,
            or ``LOG_LEVEL`` is not a logging level name.  The message
            names **all** invalid variables.
    """
    load_dotenv()

    values: dict[str, object] = {}
    invalid: list[str] = []

    for env_var, field_name in _NUMERIC_VARS.items():
        raw = os.environ.get(env_var, "").strip()
        if not raw:
            continue
        try:
            number = float(raw)
        except ValueError:
            invalid.append(env_var)
            continue
        if not math.isfinite(number) or number < 0:
            invalid.append(env_var)
        else:
            values[field_name] = number

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if isinstance(logging.getLevelName(log_level.upper()), int):
            values["log_level"] = log_level.upper()
        else:
            invalid.append("LOG_LEVEL")

    prefix = os.environ.get("TRANSCRIPT_PAGE_PREFIX", "").strip()
    if prefix:
        values["transcript_page_prefix"] = prefix

    if invalid:
        names = ", ".join(invalid)
        raise ConfigError(f"Invalid values for environment variables: {names}")

    return Settings(**values)  # type: ignore[arg-type]
