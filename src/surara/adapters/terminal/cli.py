"""``surara`` console entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from surara import __version__
from surara.errors import DocumentLoadError
from surara.runtime import telemetry

from .runner import run_terminal


def _parse_args(argv: Optional[Sequence[str]] = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="surara", description="Minimal full-screen terminal text editor."
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "path", nargs="?", default=None, help="File to load (default: empty document)"
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("SURARA_LOG_FILE"),
        help="Write structured logs to this file (env: SURARA_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("SURARA_LOG_LEVEL"),
        help="Minimum log level (env: SURARA_LOG_LEVEL, default: INFO)",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        default=None,
        help="Use a named logging preset instead of the environment settings",
    )
    parser.add_argument(
        "--no-dump",
        action="store_true",
        help="Do not print the final cursor and buffer dump on exit",
    )
    return parser, parser.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_file:
        os.environ["SURARA_LOG_FILE"] = args.log_file
    if args.log_level:
        os.environ["SURARA_LOG_LEVEL"] = args.log_level
    telemetry.configure(preset=args.log_preset)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser, args = _parse_args(argv)
    _configure_logging(args)

    try:
        session = run_terminal(args.path)
    except DocumentLoadError as exc:
        parser.error(str(exc))

    if not args.no_dump:
        print(session.dump(), file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
