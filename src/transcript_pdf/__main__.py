"""Entry point for ``python -m transcript_pdf`` and the ``transcript-pdf`` script.

Uses stdlib :mod:`argparse` for argument parsing.

Subcommands:
    parse   -- Parse a transcript PDF into a JSON record.
    combine -- Combine several JSON records into one.

Exit codes:
    0 -- The command completed and its output was written.
    1 -- An error occurred (unusable path, malformed input, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys

from transcript_pdf.config import ConfigError, Settings, load_settings
from transcript_pdf.exceptions import TranscriptError
from transcript_pdf.log import setup_logging
from transcript_pdf.pipeline import run_combine, run_parse
from transcript_pdf.summary_output import print_run_result

_ALIAS_HELP = (
    "Optional speaker alias file, one mapping per line in the format "
    "'SPEAKER NAME=ALIAS NAME'. Speech attributed to ALIAS NAME is "
    "recorded under SPEAKER NAME."
)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands.

    Returns:
        Configured :class:`argparse.ArgumentParser` with ``parse`` and
        ``combine`` subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="transcript-pdf",
        description="Convert court and deposition transcript PDFs into structured JSON.",
        epilog="Command help: transcript-pdf <command> --help",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- "parse" subcommand -------------------------------------------
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a transcript PDF.",
        description="Parse a transcript PDF.",
    )
    parse_parser.add_argument("--pdf", required=True, help="The transcript PDF file.")
    parse_parser.add_argument("--output", required=True, help="The output JSON file.")
    parse_parser.add_argument("--alias", default=None, help=_ALIAS_HELP)
    parse_parser.add_argument(
        "--text",
        default=None,
        help="Also write a plain-text rendering of the transcript to this file.",
    )
    parse_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    # --- "combine" subcommand -----------------------------------------
    combine_parser = subparsers.add_parser(
        "combine",
        help="Combine multiple transcript JSONs into one.",
        description="Combine multiple transcript JSONs into one.",
        epilog="Example: transcript-pdf combine -i t1.json -i t2.json -o combined.json",
    )
    combine_parser.add_argument(
        "-i",
        "--input",
        dest="inputs",
        action="append",
        required=True,
        help="A JSON file to be combined. Repeat for each file.",
    )
    combine_parser.add_argument("-o", "--output", required=True, help="The combined JSON file.")
    combine_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    return parser


def _handle_parse(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the ``parse`` subcommand.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    try:
        result = run_parse(
            pdf_path=args.pdf,
            output_path=args.output,
            alias_path=args.alias,
            text_path=args.text,
            settings=settings,
        )
    except TranscriptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_run_result(result)
    return 0


def _handle_combine(args: argparse.Namespace) -> int:
    """Execute the ``combine`` subcommand.

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    try:
        result = run_combine(input_paths=args.inputs, output_path=args.output)
    except TranscriptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_run_result(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the transcript-pdf CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # --- Configure logging --------------------------------------------
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    # --- Dispatch to subcommand handler -------------------------------
    if args.command == "combine":
        return _handle_combine(args)
    return _handle_parse(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
