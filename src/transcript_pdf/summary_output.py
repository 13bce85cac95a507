"""Console summary of a completed ``parse`` or ``combine`` run.

The primary entry point is :func:`format_run_result`, which returns the
formatted string.  :func:`print_run_result` writes it to stdout.
"""

from __future__ import annotations

import sys

from transcript_pdf.pipeline import RunResult

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH


def format_run_result(result: RunResult) -> str:
    """Render a :class:`RunResult` as a short multi-line summary."""
    lines: list[str] = [_SEPARATOR, f"  TRANSCRIPT {result.command.upper()}", _SEPARATOR]

    label = "Input" if len(result.sources) == 1 else "Inputs"
    lines.append(f"  {label}: {', '.join(str(s) for s in result.sources) or 'none'}")
    if result.alias_count:
        lines.append(f"  Aliases: {result.alias_count}")

    transcript = result.transcript
    speakers = ", ".join(transcript.speakers) if transcript.speakers else "none"
    lines.append(f"  Speakers ({len(transcript.speakers)}): {speakers}")

    lines.append(f"  Lines: {len(transcript.lines)}")
    for line_type, count in result.line_counts.items():
        lines.append(f"    {line_type.value:<11} {count}")

    lines.append(f"  Output: {result.output_path}")
    if result.text_output_path is not None:
        lines.append(f"  Text: {result.text_output_path}")
    lines.append(f"  Duration: {result.duration_seconds:.1f}s")
    lines.append(_SEPARATOR)

    return "\n".join(lines)


def print_run_result(result: RunResult) -> None:
    """Format and print a :class:`RunResult` to stdout."""
    sys.stdout.write(format_run_result(result) + "\n")
