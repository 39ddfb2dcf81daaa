"""List the navigable siblings of a path component."""

import logging
import os
import stat

from shortcwd.core.lossy import to_display_text

logger = logging.getLogger(__name__)


def _is_navigable(entry: os.DirEntry[str]) -> bool:
    """Whether entry can be cd'd into; entries of unknown type count as directories."""
    try:
        return stat.S_ISDIR(entry.stat().st_mode)
    except OSError:
        return True


def list_sibling_names(directory: str, exclude: str) -> list[str] | None:
    """Read the directory-type entries of directory, except exclude.

    Args:
        directory: Real path of the parent directory.
        exclude: Raw name of the component being abbreviated.

    Returns:
        Display names of the siblings, or None if the directory cannot be read.
    """
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name == exclude:
                    continue
                if _is_navigable(entry):
                    names.append(to_display_text(entry.name))
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot list {directory!r}: {e}")
        return None
    return names
