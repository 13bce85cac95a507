"""Speaker name resolution and the speaker alias file.

Transcripts refer to the same person in several ways: by a printed label
(``MR. JONES:``), by the role tokens ``Q`` (questioning attorney) and
``A`` (answering witness), and sometimes by variant spellings that the
user maps to one canonical name in an alias file.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from transcript_pdf.exceptions import InputAccessError, MalformedAliasLine

logger = logging.getLogger(__name__)

# One mapping per line: CANONICAL NAME=ALIAS NAME, no '=' on either side.
_ALIAS_LINE_RE = re.compile(r"(?P<speaker>[^=]+)=(?P<alias>[^=]+)")

QUESTION_TOKEN = "Q"
ANSWER_TOKEN = "A"
_NAMED_QUESTION_PREFIX = "Q "


class AliasTable(Mapping[str, str]):
    """Read-only mapping from an alias to its canonical speaker name."""

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases = MappingProxyType(dict(aliases or {}))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> AliasTable:
        """Build the table from ``(canonical, alias)`` pairs.

        Later pairs win when the same alias appears twice.
        """
        return cls({alias: canonical for canonical, alias in pairs})

    def resolve(self, name: str) -> str:
        """Return the canonical form of *name*, or *name* itself if it is not an alias."""
        return self._aliases.get(name, name)

    def __getitem__(self, key: str) -> str:
        return self._aliases[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AliasTable({dict(self._aliases)!r})"


def parse_alias_lines(lines: Iterable[str]) -> AliasTable:
    """Parse alias file lines of the form ``CANONICAL NAME=ALIAS NAME``.

    Both sides are trimmed of surrounding whitespace.

    Raises:
        MalformedAliasLine: On the first line without exactly one ``=``
            separating two non-empty sides (blank lines included).
    """
    pairs: list[tuple[str, str]] = []
    for line_number, line in enumerate(lines, start=1):
        match = _ALIAS_LINE_RE.fullmatch(line)
        if match is None:
            raise MalformedAliasLine(line_number, line)
        pairs.append((match.group("speaker").strip(), match.group("alias").strip()))
    return AliasTable.from_pairs(pairs)


def load_alias_table(path: str | Path) -> AliasTable:
    """Read an alias file (UTF-8) into an :class:`AliasTable`.

    Raises:
        InputAccessError: If the file is not valid UTF-8 text.
        MalformedAliasLine: If any line is not ``CANONICAL NAME=ALIAS NAME``.
    """
    try:
        text = Path(path).read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputAccessError(path, "not UTF-8 text") from exc
    table = parse_alias_lines(text.splitlines())
    logger.info("Loaded %d speaker alias(es) from %s", len(table), path)
    return table


class SpeakerResolver:
    """Turns matched speaker tokens into display names.

    Keeps the names currently bound to the questioning role (set by a
    ``Q NAME:`` label) and to the answering role (set by an examination
    header), so bare ``Q`` and ``A`` tokens resolve to a person.
    """

    def __init__(self, aliases: AliasTable | None = None) -> None:
        self.aliases = aliases if aliases is not None else AliasTable()
        self.questioning_name: str | None = None
        self.answering_name: str | None = None

    def bind_answering(self, name: str) -> None:
        self.answering_name = name

    def resolve_token(self, token: str) -> str:
        """Resolve a matched speaker token to a display name.

        Args:
            token: The label as matched, e.g. ``"Q"``, ``"MR. JONES:"``,
                ``"Q MR. SMITH:"``.

        Returns:
            The bound name for ``Q``/``A`` (or the bare token when nothing
            is bound yet), the name after ``"Q "`` (which also becomes the
            questioning name), or the label without its trailing colon.
        """
        name = token.rstrip(":")
        if name == QUESTION_TOKEN:
            return self.questioning_name if self.questioning_name is not None else QUESTION_TOKEN
        if name == ANSWER_TOKEN:
            return self.answering_name if self.answering_name is not None else ANSWER_TOKEN
        if name.startswith(_NAMED_QUESTION_PREFIX):
            self.questioning_name = name[len(_NAMED_QUESTION_PREFIX):]
            return self.questioning_name
        return name

    def display_name(self, speaker: str) -> str:
        """Apply alias substitution to an already resolved speaker name."""
        return self.aliases.resolve(speaker)
