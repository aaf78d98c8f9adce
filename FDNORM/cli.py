"""Command-line entry point.

Without input files the DDL and the FD lines are read from stdin, each block
terminated by a line reading END.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from pydantic import ValidationError

from FDNORM.config import get_analysis_settings, get_config
from FDNORM.orchestration import render_report, run_analysis
from FDNORM.phases.phase1 import END_MARKER
from FDNORM.utils.error_handling import StepError, create_error_response
from FDNORM.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ANALYSIS_ERROR = 2


def read_block(stream: TextIO) -> List[str]:
    """Read lines until END or end of input."""
    lines: List[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line.strip() == END_MARKER:
            break
        lines.append(line)
    return lines


def _read_ddl(path: Optional[Path]) -> str:
    if path is not None:
        return path.read_text(encoding="utf-8")
    print(f"Enter SQL DDL (Type '{END_MARKER}' on a new line to finish):", file=sys.stderr)
    return "\n".join(read_block(sys.stdin))


def _read_fds(path: Optional[Path]) -> List[str]:
    if path is not None:
        return path.read_text(encoding="utf-8").splitlines()
    print(f"Enter Functional Dependencies (e.g., A->B,C), type {END_MARKER} to stop:", file=sys.stderr)
    return read_block(sys.stdin)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="fdnorm",
        description="Find candidate keys and a naive 3NF decomposition from a table DDL and its functional dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="FD lines look like: A,B->C,D",
    )
    parser.add_argument("--ddl", type=Path, default=None, help="File containing the CREATE TABLE statement (default: stdin)")
    parser.add_argument("--fds", type=Path, default=None, help="File with one functional dependency per line (default: stdin)")
    parser.add_argument("--max-attributes", type=positive_int, default=None, help="Refuse key search above this many attributes (default: from config.yaml)")
    parser.add_argument("--workers", type=positive_int, default=None, help="Worker threads per key-search level (default: from config.yaml)")
    parser.add_argument("--column-type", type=str, default=None, help="SQL type for generated columns (default: from config.yaml)")
    parser.add_argument("--json", action="store_true", help="Print the analysis result as JSON")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: from config.yaml)")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = parse_args(argv)

    log_config = get_config("logging") or {}
    setup_logging(
        level=args.log_level or log_config.get("level", "WARNING"),
        format_type=log_config.get("format", "detailed"),
        log_to_file=bool(args.log_file) or bool(log_config.get("log_to_file", False)),
        log_file=args.log_file or log_config.get("log_file"),
    )

    try:
        ddl_text = _read_ddl(args.ddl)
        fd_lines = _read_fds(args.fds)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        print(f"Error: cannot read input file: {e}", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR

    try:
        settings = get_analysis_settings(
            max_attributes=args.max_attributes,
            max_workers=args.workers,
            column_type=args.column_type,
        )
    except ValidationError as e:
        logger.error(f"Invalid analysis settings: {e}")
        print(f"Error: invalid analysis settings: {e.errors()[0]['msg']}", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR

    try:
        result = run_analysis(ddl_text, fd_lines, settings)
    except StepError as e:
        logger.error(str(e))
        response = create_error_response(e, e.context)
        if args.json:
            response["error"].pop("traceback", None)
            print(json.dumps(response, indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(render_report(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
