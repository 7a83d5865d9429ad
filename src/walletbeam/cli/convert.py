"""Convert a saved GMGN followings response from the command line.

Usage:
    walletbeam-convert followings.json --format axiom --sort total_profit
    pbpaste | walletbeam-convert - --copy
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from walletbeam.services.wallet_list import (
    ExportFormat,
    LocalExportSink,
    SortDirection,
    SortField,
    WalletListService,
)
from walletbeam.settings import get_settings

LOGGER = logging.getLogger("walletbeam.cli.convert")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walletbeam-convert",
        description="Convert GMGN followed wallets into GMGN or Axiom import lists.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Path to the GMGN JSON response ('-' for stdin).")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=None,
        help="Output format (defaults to export.default_format).",
    )
    parser.add_argument(
        "--sort",
        choices=[field.value for field in SortField],
        default=None,
        help="Order wallets by a profit metric; wallets without it are listed last.",
    )
    parser.add_argument("--ascending", action="store_true", help="Sort ascending instead of descending.")
    parser.add_argument("--copy", action="store_true", help="Copy the result to the clipboard.")
    parser.add_argument(
        "--download",
        nargs="?",
        const="",
        default=None,
        metavar="NAME",
        help="Save the result into the export directory (optional file name).",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Override export.output_dir for --download.")
    return parser


def _read_input(source: str, stdin: TextIO) -> str:
    if source == "-":
        return stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None, *, service: WalletListService | None = None) -> int:
    """Entry point for ``walletbeam-convert``."""

    args = _build_parser().parse_args(argv)
    settings = get_settings()
    _configure_logging(settings.log_level)

    try:
        raw_text = _read_input(args.input, sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Unable to read %s: %s", args.input, exc)
        return 1

    if service is None:
        sink = LocalExportSink(settings=settings, output_dir=args.output_dir)
        service = WalletListService(sink=sink, settings=settings)

    if not service.process(raw_text):
        LOGGER.error(service.status)
        return 1

    if args.sort:
        direction = SortDirection.ASCENDING if args.ascending else SortDirection.DESCENDING
        service.sort_by(args.sort, direction)
    fmt = ExportFormat(args.format) if args.format else service.preview_format
    service.select_format(fmt)

    if not args.copy and args.download is None:
        sys.stdout.write(service.preview + "\n")
        return 0

    exit_code = 0
    if args.copy:
        if service.copy(fmt):
            LOGGER.info(service.status)
        else:
            LOGGER.error(service.status)
            exit_code = 1
    if args.download is not None:
        location = service.download(fmt, filename=args.download or None)
        if location:
            LOGGER.info("%s (%s)", service.status, location)
        else:
            LOGGER.error(service.status)
            exit_code = 1
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
