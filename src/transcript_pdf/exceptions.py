"""Custom exceptions for the transcript-pdf conversion pipeline.

Every failure that aborts a ``parse`` or ``combine`` run derives from
:class:`TranscriptError`, so the CLI can report it and exit without
writing any output.

Exception hierarchy::

    TranscriptError              (base for all conversion failures)
    +-- InputAccessError         (path missing, not a file, or unreadable)
    +-- MalformedAliasLine       (alias file line not ``NAME=ALIAS``)
    +-- MalformedInterchangeRecord (``combine`` input fails to decode)
    +-- UnderlyingDecodeFailure  (the PDF engine cannot read the document)
    +-- OutputWriteError         (an output file cannot be written)
"""

from __future__ import annotations

from pathlib import Path


class TranscriptError(Exception):
    """Base exception for all transcript conversion failures."""


class InputAccessError(TranscriptError):
    """Raised when an input path cannot be used.

    Checked before any parsing begins.

    Attributes:
        path: The offending path.
        reason: Short description (``"file not found"``, ``"is a directory"``,
            ``"permission denied"``, ``"not UTF-8 text"``).
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{reason[:1].upper()}{reason[1:]}: {path}")
        self.path = Path(path)
        self.reason = reason


class MalformedAliasLine(TranscriptError):
    """Raised when a line of the alias file is not ``SPEAKER NAME=ALIAS NAME``.

    Attributes:
        line_number: 1-based line number within the alias file.
        line: The raw line text.
    """

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f'Alias file must have lines in the format "SPEAKER NAME=ALIAS NAME" '
            f"(line {line_number}: {line!r})"
        )
        self.line_number = line_number
        self.line = line


class MalformedInterchangeRecord(TranscriptError):
    """Raised when a transcript JSON file cannot be decoded.

    Covers both JSON syntax errors and schema validation failures.

    Attributes:
        source: Where the record came from (a file path or ``"<string>"``).
        detail: The decoder's description of the problem.
    """

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"Invalid transcript record in {source}: {detail}")
        self.source = source
        self.detail = detail


class UnderlyingDecodeFailure(TranscriptError):
    """Raised when the PDF engine cannot decode the document structure.

    The engine's own message is carried through unchanged and the
    original exception is chained as ``__cause__``.

    Attributes:
        path: The PDF that failed to decode.
        detail: The engine's error message.
    """

    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(f"Cannot decode PDF {path}: {detail}")
        self.path = Path(path)
        self.detail = detail


class OutputWriteError(TranscriptError):
    """Raised when an output file cannot be written.

    Outputs written earlier in the same run are removed before this is
    raised.

    Attributes:
        path: The output that failed.
        reason: The operating system's description of the failure.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
