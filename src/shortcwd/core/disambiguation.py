"""Keep dot-prefixed components from collapsing into navigation tokens."""

from shortcwd.core.graphemes import graphemes

MIN_DISAMBIGUABLE_LEN = 3


def disambiguate(component: str, prefix: str) -> str:
    """Lengthen a dot-prefixed abbreviation so it never reads as '.' or '..'.

    ".a" must not become "." and "..b" must not become "." or "..".

    Args:
        component: The full component text.
        prefix: Shortest unique prefix computed for component.

    Returns:
        prefix, or a longer prefix of component when prefix starts with a dot.
    """
    if not prefix.startswith("."):
        return prefix

    clusters = graphemes(component)
    window = clusters[: min(len(clusters), MIN_DISAMBIGUABLE_LEN)]

    dot_positions = [i for i, cluster in enumerate(window) if cluster == "."]
    if not dot_positions:
        return "".join(window)

    end = min(dot_positions[-1] + 2, len(clusters), MIN_DISAMBIGUABLE_LEN)
    candidate = clusters[:end]
    if len(candidate) > len(graphemes(prefix)):
        return "".join(candidate)
    return prefix
