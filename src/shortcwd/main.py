"""Print the compressed working directory for use in a shell prompt.

Typical use from a prompt function:

    PS1='$(shortcwd)> '
"""

import argparse
import logging
import os
import sys

from shortcwd import __version__
from shortcwd.config import get_settings
from shortcwd.core.compressor import compress
from shortcwd.logging_config import configure_logging

logger = logging.getLogger(__name__)

UNKNOWN_DIRECTORY = "?"


def _uid(value: str) -> int:
    """argparse type for a non-negative UID."""
    try:
        uid = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("expected an integer") from None
    if uid < 0:
        raise argparse.ArgumentTypeError("expected a non-negative integer")
    return uid


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="shortcwd",
        description="Compress a directory path into a short, unambiguous prompt string",
    )
    parser.add_argument(
        "-w",
        "--working-directory",
        metavar="DIRECTORY",
        default=None,
        help="Path to compress. Defaults to $PWD, then the process working directory.",
    )
    parser.add_argument(
        "-m",
        "--min-home-dir-uid",
        metavar="UID",
        type=_uid,
        default=settings.MIN_HOME_DIR_UID,
        help="Only abbreviate another user's home directory if their UID is at least this. "
        "Default: %(default)s",
    )
    parser.add_argument(
        "-M",
        "--max-home-dir-uid",
        metavar="UID",
        type=_uid,
        default=settings.MAX_HOME_DIR_UID,
        help="Only abbreviate another user's home directory if their UID is at most this.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"shortcwd {__version__}",
    )
    return parser


def working_directory(explicit: str | None) -> str | None:
    """Pick the directory to compress: explicit argument, then $PWD, then getcwd()."""
    if explicit:
        return explicit

    pwd = os.environ.get("PWD")
    if pwd:
        return pwd

    try:
        return os.getcwd()
    except OSError as e:
        logger.debug(f"Cannot determine working directory: {e}")
        return None


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else get_settings().LOG_LEVEL.upper())

    directory = working_directory(args.working_directory)
    if directory is None:
        sys.stdout.write(f"{UNKNOWN_DIRECTORY}\n")
        return

    compressed = compress(directory, args.min_home_dir_uid, args.max_home_dir_uid)
    sys.stdout.write(f"{compressed}\n")


if __name__ == "__main__":
    main()
