"""Command line interface for converting nbib exports to CSL-JSON."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .app import NbibConverterApp
from .config import ConverterConfig
from .errors import NbibError
from .logging_utils import get_logger, log_exception, set_log_level
from .report import render_report

logger = get_logger("cli")


def main(argv: List[str] | None = None) -> int:
    config = ConverterConfig.from_env()

    parser = argparse.ArgumentParser(description="Convert MEDLINE/PubMed nbib records to CSL-JSON")
    parser.add_argument("input", help="Path to an nbib file, or '-' to read standard input")
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write CSL-JSON to this file instead of standard output",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a conversion summary to standard error",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.strict,
        help="Abort on the first malformed citation block instead of skipping it",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=config.indent,
        help="JSON indentation (0 for compact output)",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)

    set_log_level(args.log_level)
    converter = NbibConverterApp(strict=args.strict, indent=args.indent)

    try:
        result = converter.convert_file(args.input)
    except NbibError as exc:
        log_exception(f"Conversion of {args.input} aborted", exc, logger)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output = converter.to_json(result)
    if args.json_output:
        args.json_output.write_text(output + "\n", encoding="utf-8")
    else:
        print(output)

    if args.report:
        print(render_report(result), file=sys.stderr)

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
