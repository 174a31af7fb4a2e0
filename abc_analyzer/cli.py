"""Command-line interface for abc_analyzer."""

from __future__ import annotations

import argparse
import contextlib
import logging
import signal
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .core.exceptions import AlembicBindingsNotAvailableError, ArchiveUnavailableError
from .core.progress import CancellationToken
from .inspectors import get_info

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print one line per object of an Alembic archive: "
        "identifier|type|name|samples|parent|children[|metadata]."
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Path to the Alembic archive to inspect. If omitted, a file picker appears.",
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Never show the file picker; a path must be supplied.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Configure logging verbosity for troubleshooting.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


@contextlib.contextmanager
def _cancel_on_interrupt(token: CancellationToken) -> Iterator[None]:
    """Turn Ctrl-C into a cooperative cancellation request while the block runs."""

    def _handler(signum, frame) -> None:
        logger.info("Interrupt received, cancelling")
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.path is None:
        if args.no_gui:
            parser.error("--no-gui requires that you supply a file path.")
        from .gui import ask_for_abc_file

        selected = ask_for_abc_file()
        if not selected:
            print("No Alembic archive selected; exiting.")
            return 1
        path = Path(selected)
    else:
        path = args.path

    if not path.exists():
        parser.error(f"File not found: {path}")

    token = CancellationToken()
    try:
        with _cancel_on_interrupt(token):
            info = get_info(str(path), progress=token)
    except AlembicBindingsNotAvailableError as exc:
        parser.error(str(exc))
    except ArchiveUnavailableError as exc:
        parser.error(str(exc))

    if info.halted:
        print("Alembic import halted!", file=sys.stderr)
        return 0

    for line in info.lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
