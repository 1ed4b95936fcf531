"""Command-line interface for pretty-tree."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from . import RenderConfig, process_stream
from .log import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="Pretty-print JSON so that it fits a target line width",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s data.json                      # Fit to 80 columns
    %(prog)s data.json -w 40 -i 4           # 40 columns, 4-space indent
    %(prog)s --unlimited data.json          # Everything on one line
    %(prog)s --jsonl events.jsonl -n 20     # Last 20 records of a JSONL file
    cat data.json | %(prog)s --sort-keys
        """
    )

    # Positional file argument
    parser.add_argument("input_file", nargs="?", type=Path, help="JSON file to read")
    parser.add_argument("-f", "--file", type=Path, help="Read from JSON file")

    # Layout
    width_group = parser.add_mutually_exclusive_group()
    width_group.add_argument("-w", "--width", type=int, default=80, metavar="N",
                             help="Maximum line width (default: 80)")
    width_group.add_argument("--unlimited", action="store_true",
                             help="No line width limit")
    parser.add_argument("-i", "--indent", type=int, default=2, metavar="N",
                        help="Spaces per indent level (default: 2)")

    # Output style
    parser.add_argument("--sort-keys", action="store_true", help="Sort object keys")
    parser.add_argument("--no-trailing-commas", dest="trailing_commas", action="store_false",
                        help="Omit the trailing comma in broken containers")
    parser.add_argument("--ascii", action="store_true", help="Escape non-ASCII characters")

    # Input mode
    parser.add_argument("--jsonl", action="store_true",
                        help="Treat every input line as a separate JSON document")
    parser.add_argument("-n", "--lines", type=int, default=0, metavar="N",
                        help="Show only last N lines (with --jsonl)")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log rendering details to stderr")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""

    args = parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG")

    # Build config
    try:
        config = RenderConfig(
            max_line=None if args.unlimited else args.width,
            tab_size=args.indent,
            trailing_commas=args.trailing_commas,
            sort_keys=args.sort_keys,
            ensure_ascii=args.ascii,
        )
    except ValidationError as exc:
        print(f"error: invalid options: {exc.error_count()} error(s)", file=sys.stderr)
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"  {field}: {error['msg']}", file=sys.stderr)
        return 2

    # Determine input source
    input_file: TextIO

    # Positional file takes precedence over -f/--file
    file_path = args.input_file or args.file

    if file_path:
        if not file_path.exists():
            print(f"error: file not found: {file_path}", file=sys.stderr)
            return 1
        input_file = open(file_path, encoding="utf-8")
    elif not sys.stdin.isatty():
        input_file = sys.stdin
    else:
        print("error: no input source specified", file=sys.stderr)
        return 1

    try:
        process_stream(input_file, config, jsonl=args.jsonl, tail_lines=args.lines)
    except json.JSONDecodeError as exc:
        print(f"error: invalid JSON: {exc}", file=sys.stderr)
        return 1
    finally:
        if input_file is not sys.stdin:
            input_file.close()

    return 0


if __name__ == "__main__":
    exit_code: int = 0
    try:
        exit_code = main()
    except KeyboardInterrupt:
        print("\nexiting", file=sys.stderr)

    sys.exit(exit_code)
