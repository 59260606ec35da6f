from __future__ import annotations
import logging
from collections.abc import Set as AbstractSet
from typing import Iterable, Iterator, List, Set

from .models import TrieNode
from .normalize import normalize_word

log = logging.getLogger(__name__)

_ROOT = 0


class VocabularyView(AbstractSet):
    """
    Read-only live view over the words stored in a WordIndex.
    Supports `in`, len(), iteration and the usual set comparisons,
    but has no mutating methods; it never copies the underlying set.
    """
    __slots__ = ("_words",)

    def __init__(self, words: Set[str]) -> None:
        self._words = words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"VocabularyView({sorted(self._words)!r})"


class WordIndex:
    """
    Trie-backed prefix store.
    Nodes live in a growable arena (list[TrieNode]); children point at arena
    slots by index. Slot 0 is the root (empty prefix), which is never terminal.
    Sibling characters are always visited in lexicographic order, so
    suggest() is deterministic for a given vocabulary.
    """
    def __init__(self, words: Iterable[str] = ()) -> None:
        self._nodes: List[TrieNode] = [TrieNode()]
        self._words: Set[str] = set()
        self._view = VocabularyView(self._words)
        if words:
            self.insert_many(words)

    # -------- Build-time API --------
    def insert(self, word: str) -> None:
        if not isinstance(word, str):
            raise TypeError(f"insert(): word must be str, got {type(word).__name__}")
        w = normalize_word(word)
        if not w:
            # the root stands for the empty prefix; it never becomes a word
            return
        node = _ROOT
        for ch in w:
            nxt = self._nodes[node].children.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes.append(TrieNode())
                self._nodes[node].children[ch] = nxt
            node = nxt
        self._nodes[node].terminal = True
        self._words.add(w)

    def insert_many(self, words: Iterable[str]) -> int:
        """Insert every word; return how many were new."""
        before = len(self._words)
        for w in words:
            self.insert(w)
        added = len(self._words) - before
        log.debug("insert_many: +%d words (total=%d, nodes=%d)", added, len(self._words), len(self._nodes))
        return added

    # -------- Query API --------
    def suggest(self, prefix: str, limit: int) -> List[str]:
        """
        Up to `limit` complete words starting with `prefix` (case-insensitive).
        Depth-first, a node's own word before its descendants, children in
        lexicographic order. Unknown prefix -> []. Empty prefix -> from root.
        """
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"suggest(): limit must be int, got {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"suggest(): limit must be >= 0, got {limit}")
        if not isinstance(prefix, str):
            raise TypeError(f"suggest(): prefix must be str, got {type(prefix).__name__}")
        out: List[str] = []
        if limit == 0:
            return out
        for word in self.iter_suggestions(prefix):
            out.append(word)
            if len(out) >= limit:
                break
        return out

    def iter_suggestions(self, prefix: str) -> Iterator[str]:
        """Lazy generator behind suggest(); yields every word under `prefix`."""
        if not isinstance(prefix, str):
            raise TypeError(f"suggest(): prefix must be str, got {type(prefix).__name__}")
        p = normalize_word(prefix)
        start = self._find(p)
        if start is None:
            return
        # explicit stack of (slot, spelled-so-far); push children reversed so
        # the smallest character is popped first
        stack = [(start, p)]
        while stack:
            slot, spelled = stack.pop()
            node = self._nodes[slot]
            if node.terminal:
                yield spelled
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], spelled + ch))

    # -------- Introspection --------
    @property
    def vocabulary(self) -> VocabularyView:
        """The stored words, lowercase; a live read-only view."""
        return self._view

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._words

    def __len__(self) -> int:
        return len(self._words)

    # -------- internals --------
    def _find(self, prefix: str) -> int | None:
        node = _ROOT
        for ch in prefix:
            nxt = self._nodes[node].children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node
