"""Compress a path into a short prompt string.

Every interior directory is cut down to the shortest grapheme prefix that no
navigable sibling shares, the last component is kept whole and a home
directory prefix becomes "~" or "~username":

    /home/alice/include/c++/8.2.1/experimental/bits -> ~/i/c/8/e/bits

Any step that cannot decide (unreadable directory, ambiguous name) leaves
that component uncompressed instead of failing.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from shortcwd.config import get_settings
from shortcwd.core.disambiguation import disambiguate
from shortcwd.core.home_prefix import ROOT, own_home_dir, resolve_home_prefix
from shortcwd.core.lossy import to_display_text
from shortcwd.core.siblings import list_sibling_names
from shortcwd.core.trie import GraphemeClusterTrie
from shortcwd.core.user_db import list_home_records
from shortcwd.models.home import HomeRecord

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def _fresh_records() -> Iterator[HomeRecord]:
    """Snapshot the user database only once a scan is actually needed."""
    yield from list_home_records(get_settings().passwd_path())


def compress_component(directory: str, component: str) -> str:
    """Abbreviate one interior component against its siblings in directory.

    Args:
        directory: Real path of the directory containing component.
        component: Raw component name.

    Returns:
        The abbreviation, or the whole component when none is safe.
    """
    text = to_display_text(component)

    siblings = list_sibling_names(directory, component)
    if siblings is None:
        return text

    trie = GraphemeClusterTrie.from_names(siblings)
    prefix = trie.shortest_unique_prefix(text)
    if prefix is None:
        return text

    return disambiguate(text, prefix)


def compress(
    path: str | bytes | os.PathLike[str],
    min_home_dir_uid: int = 0,
    max_home_dir_uid: int | None = None,
    *,
    home_dir: str | None = None,
    home_records: Iterable[HomeRecord] | None = None,
) -> str:
    """Compress path for display in a prompt.

    Args:
        path: Path to compress; relative paths are taken from the current directory.
        min_home_dir_uid: Lowest UID whose home directory may become "~username".
        max_home_dir_uid: Highest such UID, or None for no limit.
        home_dir: The invoking user's home; None looks it up, "" disables it.
        home_records: User database snapshot; None reads a fresh one if needed.

    Returns:
        The display string. Never raises for filesystem or database problems.
    """
    try:
        absolute = Path(os.fsdecode(path)).absolute()
    except OSError as e:
        logger.debug(f"Cannot anchor relative path {path!r}: {e}")
        return to_display_text(path)

    if home_dir is None:
        home_dir = own_home_dir()
    records = _fresh_records() if home_records is None else home_records

    prefix = resolve_home_prefix(
        absolute,
        min_home_dir_uid,
        max_home_dir_uid,
        home_dir=home_dir,
        records=records,
    )

    if not prefix.remaining:
        return prefix.display or ROOT

    *interior, leaf = prefix.remaining
    pieces = [prefix.display]
    traversed = prefix.consumed

    for component in interior:
        pieces.append(compress_component(traversed, component))
        traversed = os.path.join(traversed, component)

    pieces.append(to_display_text(leaf))
    return SEPARATOR.join(pieces)
