# wordfilter/engine/trie.py

"""Prefix tree compiled from the sensitive word list.

Construction is two-phase: a DictionaryBuilder owns the mutable tree while
keywords are inserted, and build() hands out a read-only Dictionary that
any number of scanners may share.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from wordfilter.core.exceptions import DictionaryFrozenError, ValidationError

logger = logging.getLogger(__name__)


class TrieNode:
    """One prefix position in the keyword set."""

    __slots__ = ("is_terminal", "children")

    def __init__(self) -> None:
        self.is_terminal: bool = False
        self.children: Mapping[str, "TrieNode"] = {}

    def __repr__(self):
        return f"<TrieNode terminal={self.is_terminal} children={len(self.children)}>"


class Dictionary:
    """Read-only handle over a built keyword trie."""

    def __init__(self, root: TrieNode, keyword_count: int) -> None:
        self._root = root
        self._keyword_count = keyword_count

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def keyword_count(self) -> int:
        """Number of distinct keywords compiled into the trie."""
        return self._keyword_count

    @staticmethod
    def child_of(node: TrieNode, char: str) -> Optional[TrieNode]:
        """Single-step lookup; returns None when no keyword continues with char."""
        return node.children.get(char)

    def __contains__(self, keyword: object) -> bool:
        if not isinstance(keyword, str) or not keyword:
            return False

        node: Optional[TrieNode] = self._root
        for char in keyword:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_terminal

    def __len__(self) -> int:
        return self._keyword_count

    def __repr__(self):
        return f"<Dictionary keywords={self._keyword_count}>"


class DictionaryBuilder:
    """Single-owner, mutable phase of the keyword trie."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._keyword_count = 0
        self._built = False

    def insert(self, keyword: str) -> None:
        """Adds a keyword to the trie.

        Inserting a keyword twice is a no-op, as is an empty keyword.

        Args:
            keyword: Keyword to compile

        Raises:
            ValidationError: If the keyword is not a string.
            DictionaryFrozenError: If build() was already called.
        """
        if self._built:
            raise DictionaryFrozenError("Cannot insert into a built dictionary")

        if not isinstance(keyword, str):
            raise ValidationError(f"Keyword must be a string, got {type(keyword)}")

        if not keyword:
            logger.debug("Ignoring empty keyword")
            return

        node = self._root
        for char in keyword:
            children: Dict[str, TrieNode] = node.children  # type: ignore[assignment]
            child = children.get(char)
            if child is None:
                child = TrieNode()
                children[char] = child
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self._keyword_count += 1

    def insert_all(self, keywords: Iterable[str]) -> "DictionaryBuilder":
        """Inserts every keyword of an iterable; returns the builder."""
        for keyword in keywords:
            self.insert(keyword)
        return self

    def build(self) -> Dictionary:
        """Freezes the trie and returns its read-only handle.

        Child tables are replaced by read-only views, so the returned
        Dictionary can be shared across threads without locking.
        """
        if self._built:
            raise DictionaryFrozenError("Dictionary has already been built")

        stack = [self._root]
        while stack:
            node = stack.pop()
            stack.extend(node.children.values())
            node.children = MappingProxyType(node.children)  # type: ignore[arg-type]

        self._built = True
        logger.debug(
            "Keyword dictionary built", extra={"keyword_count": self._keyword_count}
        )
        return Dictionary(self._root, self._keyword_count)
