"""Grapheme cluster trie for shortest unique prefix queries."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from shortcwd.core.graphemes import graphemes


@dataclass
class TrieNode:
    """One node per grapheme cluster edge; the root is the empty prefix."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    terminal: bool = False


class GraphemeClusterTrie:
    """Trie keyed by grapheme clusters, built from the names of sibling entries."""

    def __init__(self) -> None:
        """Create an empty trie."""
        self._root = TrieNode()
        self._size = 0

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "GraphemeClusterTrie":
        """Build a trie containing every name in names."""
        trie = cls()
        for name in names:
            trie.insert(name)
        return trie

    def insert(self, name: str) -> None:
        """Insert name one grapheme cluster at a time."""
        current = self._root
        for cluster in graphemes(name):
            child = current.children.get(cluster)
            if child is None:
                child = TrieNode()
                current.children[cluster] = child
            current = child

        if not current.terminal:
            current.terminal = True
            self._size += 1

    def shortest_unique_prefix(self, candidate: str) -> str | None:
        """Find the shortest prefix of candidate that no inserted name starts with.

        Args:
            candidate: Name to abbreviate.

        Returns:
            The prefix up to and including the first cluster with no matching
            branch, or None if candidate is a prefix of (or equal to) some name.
        """
        consumed: list[str] = []
        current = self._root

        for cluster in graphemes(candidate):
            consumed.append(cluster)
            child = current.children.get(cluster)
            if child is None:
                return "".join(consumed)
            current = child

        return None

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        current = self._root
        for cluster in graphemes(name):
            child = current.children.get(cluster)
            if child is None:
                return False
            current = child
        return current.terminal

    def __len__(self) -> int:
        return self._size
