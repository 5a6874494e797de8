"""
Command-line front end.

    python -m shell_delete D:\\old\\report.xlsx D:\\old\\notes.txt
    python -m shell_delete --permanent --yes D:\\tmp\\build.log
    python -m shell_delete --no-dialogs --flags ALLOWUNDO,SIMPLEPROGRESS D:\\tmp\\cache
"""

from __future__ import annotations

import argparse
import logging
import sys

from .flags import parse_flags
from .operations import delete
from .outcome import Cancelled, Succeeded

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CANCELLED = 2

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shell-delete",
        description="Delete files or send them to the Recycle Bin through the Windows shell",
    )
    p.add_argument("paths", nargs="+", help="Files or folders to delete")
    p.add_argument("--permanent", action="store_true", help="Delete permanently instead of recycling")
    p.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    p.add_argument(
        "--no-dialogs",
        action="store_true",
        help="Suppress shell dialogs; confirmation is asked on the console unless --yes",
    )
    p.add_argument(
        "--flags",
        type=parse_flags,
        default=None,
        help="Comma-separated starting flags, e.g. ALLOWUNDO,WANTNUKEWARNING",
    )
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    outcome = delete(
        args.paths,
        permanently_delete=args.permanent,
        no_confirmation=args.yes,
        show_dialogs=not args.no_dialogs,
        flags=args.flags,
    )

    if isinstance(outcome, Succeeded):
        return EXIT_OK
    if isinstance(outcome, Cancelled):
        return EXIT_CANCELLED
    return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
