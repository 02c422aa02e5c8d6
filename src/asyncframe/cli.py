"""
Command line interface for asyncframe.

Prints package information, or streams a CSV file through a lazy frame and
prints it as a table, CSV or JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .io import scan_csv
from .lazyframe import AsyncDataFrame

_FORMATS = ("table", "csv", "json")


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asyncframe",
        description="Utility commands for the asyncframe package.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the asyncframe version and exit.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a short summary of the project.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="CSV file to stream and print.",
    )
    parser.add_argument(
        "--to",
        choices=_FORMATS,
        default="table",
        help="Output format (default: table).",
    )
    parser.add_argument("--skip", type=_non_negative, default=0, help="Rows to skip.")
    parser.add_argument("--take", type=_non_negative, help="Maximum rows to print.")
    parser.add_argument(
        "--batch-size",
        type=_positive,
        help="Rows read from the file per batch.",
    )
    return parser


async def _render(frame: AsyncDataFrame, fmt: str) -> str:
    if fmt == "csv":
        return await frame.to_csv()
    if fmt == "json":
        return await frame.to_json()
    return await frame.to_string()


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the `asyncframe` console script.

    Parameters
    ----------
    argv : Sequence[str], optional
        Command line arguments (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Exit status code.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        print(__version__)
        return 0

    if args.summary:
        print(
            "asyncframe – lazy, asynchronously iterable dataframes. "
            "Use '--version' to view the installed version."
        )
        return 0

    if args.path is not None:
        if not Path(args.path).is_file():
            print(f"asyncframe: no such file: {args.path}", file=sys.stderr)
            return 2
        frame = scan_csv(args.path, batch_size=args.batch_size).skip(args.skip)
        if args.take is not None:
            frame = frame.take(args.take)
        output = asyncio.run(_render(frame, args.to))
        print(output, end="" if output.endswith("\n") else "\n")
        return 0

    # No explicit option selected: show help to stderr to mirror argparse CLI UX.
    parser.print_help(sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
