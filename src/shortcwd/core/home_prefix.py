"""Resolve which home directory, if any, a path lives under."""

import logging
import os
import pwd
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from shortcwd.models.home import HomePrefix, HomeRecord

logger = logging.getLogger(__name__)

ROOT = "/"


def own_home_dir() -> str | None:
    """Get the invoking user's home directory.

    $HOME wins when set and non-empty; otherwise the user database entry for
    the current UID is used.
    """
    home = os.environ.get("HOME")
    if home:
        return home
    try:
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except KeyError:
        return None


def strip_prefix(parts: tuple[str, ...], prefix: tuple[str, ...]) -> tuple[str, ...] | None:
    """Strip prefix from parts component-wise.

    Returns:
        The remaining components, or None if prefix does not match
    """
    if len(prefix) > len(parts) or parts[: len(prefix)] != prefix:
        return None
    return parts[len(prefix) :]


def _canonical_home(record: HomeRecord) -> Path | None:
    """Canonicalize a recorded home directory, or None if it does not resolve."""
    home = Path(record.home_dir)
    if not home.is_absolute():
        logger.debug(f"Skipping {record.username}: relative home {record.home_dir!r}")
        return None
    try:
        return home.resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug(f"Skipping {record.username}: cannot resolve {record.home_dir!r}: {e}")
        return None


def _remaining_len(remaining: tuple[str, ...]) -> int:
    return len("/".join(remaining))


def resolve_home_prefix(
    path: str | PurePosixPath,
    min_uid: int = 0,
    max_uid: int | None = None,
    *,
    home_dir: str | None = None,
    records: Iterable[HomeRecord] = (),
) -> HomePrefix:
    """Find the home directory prefix of an absolute path.

    The invoking user's own home is tried first and displays as "~". Otherwise
    every record with a UID in [min_uid, max_uid] whose canonical home is a
    prefix of the path is a candidate; the one leaving the shortest remainder
    wins, ties going to the lexicographically smallest username, and it
    displays as "~username". With no match the root is stripped and the
    display prefix is empty.

    Args:
        path: Absolute path to inspect.
        min_uid: Lowest UID whose home may be abbreviated.
        max_uid: Highest UID whose home may be abbreviated, or None for no limit.
        home_dir: The invoking user's home directory, if known.
        records: User database snapshot to scan.

    Returns:
        The remaining components, the consumed real path and the display prefix.
    """
    parts = PurePosixPath(path).parts

    if home_dir:
        remaining = strip_prefix(parts, PurePosixPath(home_dir).parts)
        if remaining is not None:
            return HomePrefix(remaining=remaining, consumed=home_dir, display="~")

    best: tuple[int, str, tuple[str, ...], Path] | None = None
    for record in records:
        if record.uid < min_uid or (max_uid is not None and record.uid > max_uid):
            continue

        canonical = _canonical_home(record)
        if canonical is None:
            continue

        remaining = strip_prefix(parts, canonical.parts)
        if remaining is None:
            continue

        key = (_remaining_len(remaining), record.username)
        if best is None or key < best[:2]:
            best = (key[0], key[1], remaining, canonical)

    if best is not None:
        _, username, remaining, canonical = best
        logger.debug(f"Home prefix {canonical} matched for user {username}")
        return HomePrefix(remaining=remaining, consumed=str(canonical), display=f"~{username}")

    anchored = bool(parts) and parts[0].startswith(ROOT)
    return HomePrefix(remaining=parts[1:] if anchored else parts, consumed=ROOT)
