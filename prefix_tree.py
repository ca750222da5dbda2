"""
Prefix tree (trie) for word and prefix lookups.

Characters are the elements produced by iterating the input, so a ``str``
is indexed one code point per edge. Grapheme clusters and combining marks
are not merged.

The trie is not thread-safe. Callers sharing one across threads should
guard every call with a single ``threading.Lock``.
"""

from __future__ import annotations

import logging

__all__ = ["Trie", "TrieNode"]

log = logging.getLogger("prefix_tree")


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        children (dict[str, TrieNode]):
            Mapping from a character to the next TrieNode.
        is_end_of_word (bool):
            True if an inserted word ends exactly at this node.
    """
    __slots__ = ("children", "is_end_of_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word: bool = False

    def __repr__(self) -> str:
        return (
            f"TrieNode(is_end_of_word={self.is_end_of_word}, "
            f"children={sorted(self.children)!r})"
        )


class Trie:
    """
    A trie (prefix tree) supporting insertion, exact search and
    prefix checks. Nodes are only ever added, never removed.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = TrieNode()

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.

        Inserting the empty string marks the root. Inserting a word
        that is already present changes nothing.

        Args:
            word (str): The word to insert.

        Returns:
            None
        """
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_end_of_word:
            log.debug("Marked new word of length %d", len(word))
        node.is_end_of_word = True

    def search(self, word: str) -> bool:
        """
        Determine whether a word was inserted into the trie.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the word exists, False otherwise.
        """
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any word in the trie begins with the given prefix.

        The empty prefix always matches, even on an empty trie.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
        """
        return self._walk(prefix) is not None

    # -------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __repr__(self) -> str:
        # explicit stack; deep tries must not hit the recursion limit
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return f"Trie(nodes={count})"
