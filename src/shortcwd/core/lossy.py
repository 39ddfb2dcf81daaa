"""Lossy conversion of OS-level names into display text."""

import os

REPLACEMENT_CHARACTER = "\ufffd"


def to_display_text(value: str | bytes | os.PathLike[str] | os.PathLike[bytes]) -> str:
    """Convert a filesystem name or path into valid text.

    Bytes that are not valid UTF-8 survive os.fsdecode as surrogate escapes;
    those become U+FFFD.

    Args:
        value: Name or path as returned by the OS.

    Returns:
        Text safe to segment and print.
    """
    text = os.fsdecode(value)
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Lone surrogates outside the escape range
        return text.encode("utf-8", "replace").decode("utf-8")
    return raw.decode("utf-8", "replace")
