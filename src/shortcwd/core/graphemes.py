"""Split text into user-perceived characters (extended grapheme clusters)."""

import regex

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters.

    Args:
        text: Text to segment.

    Returns:
        The clusters in order; joining them yields the original text.
    """
    return _GRAPHEME.findall(text)

