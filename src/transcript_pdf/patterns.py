"""Regular-expression matchers for transcript line shapes.

Court reporters mark structure with a handful of textual conventions.
Each convention is one compiled pattern plus a small matching function:

- :func:`match_examination_header` -- the witness-examination
  announcement (``JOHN DOE, Sworn, Examined by Mr. Smith``).
- :func:`match_speaker_token` -- a leading speaker label (``MR. JONES:``,
  ``Q``, ``A``) followed by the spoken text.
- :func:`is_parenthesized` -- a line wrapped in one pair of parentheses.
- :func:`strip_line_number` -- the running per-page line number printed
  at the end of a line.

"Non-lowercase" in these patterns means any character outside the Unicode
``Ll`` (lowercase letter) category, so names in any script qualify.
"""

from __future__ import annotations

import re
import sys
import unicodedata
from dataclasses import dataclass
from functools import lru_cache


@lru_cache(maxsize=None)
def _lowercase_class() -> str:
    """Build a regex character-class body covering Unicode category ``Ll``."""
    ranges: list[tuple[int, int]] = []
    for code in range(sys.maxunicode + 1):
        if unicodedata.category(chr(code)) != "Ll":
            continue
        if ranges and ranges[-1][1] == code - 1:
            ranges[-1] = (ranges[-1][0], code)
        else:
            ranges.append((code, code))
    parts = []
    for start, end in ranges:
        if start == end:
            parts.append(re.escape(chr(start)))
        else:
            parts.append(f"{re.escape(chr(start))}-{re.escape(chr(end))}")
    return "".join(parts)


@lru_cache(maxsize=None)
def _examination_re() -> re.Pattern[str]:
    lower = _lowercase_class()
    return re.compile(
        rf"(?P<witness>[^,{lower}]+), (?:Previously )?(?:Sworn|Affirmed|Acknowledges Oath), "
        r"(?:Cross-e|E)xamined by .+"
    )


@lru_cache(maxsize=None)
def _speaker_re() -> re.Pattern[str]:
    # The label may not start with a space; ``Q``/``A`` stand alone, any
    # other label is non-lowercase text ending in a colon.
    return re.compile(rf"(?! )(?P<speaker>[^{_lowercase_class()}]+:|Q|A)\s+(?P<text>.+)")


_PARENTHESIZED_RE = re.compile(r"\s*\([^()]+\)\s*")


@dataclass(frozen=True)
class SpeakerMatch:
    """A leading speaker label split from the rest of the line.

    Attributes:
        token: The label as printed, e.g. ``"MR. JONES:"``, ``"Q"``.
        text: Everything after the label and its separating whitespace.
    """

    token: str
    text: str


def match_examination_header(text: str) -> str | None:
    """Return the witness name if *text* announces a witness examination.

    Args:
        text: One line of transcript text.

    Returns:
        The name segment before the first comma, or ``None`` when the
        whole line does not have the examination-announcement shape.
    """
    match = _examination_re().fullmatch(text)
    return match.group("witness") if match else None


def match_speaker_token(text: str) -> SpeakerMatch | None:
    """Split a leading speaker label from *text*.

    Returns:
        A :class:`SpeakerMatch`, or ``None`` if the line does not begin
        with a speaker label followed by whitespace and more text.
    """
    match = _speaker_re().fullmatch(text)
    if match is None:
        return None
    return SpeakerMatch(token=match.group("speaker"), text=match.group("text"))


def is_parenthesized(text: str) -> bool:
    """Whether *text* is wholly wrapped in one balanced pair of parentheses."""
    return _PARENTHESIZED_RE.fullmatch(text) is not None


def strip_line_number(text: str, line_number: int) -> str:
    """Remove the printed *line_number* (and surrounding whitespace) from the end of *text*."""
    return re.sub(rf"\s*{line_number}\s*$", "", text)


def strip_parentheses(text: str) -> str:
    """Trim whitespace, then any run of parentheses, from both ends of *text*."""
    return text.strip().strip("()")
