# src/smartedit/models.py
"""
Data models for the editing engines.

- TrieNode: one slot of the WordIndex node arena.
- Correction: a (word, distance) candidate produced by the spell corrector.
- EditResult: the snapshot an EditingSession hands back to the presentation
  layer after every event.

These classes do not contain business logic; they only structure the data.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Tuple


@dataclass(slots=True)
class TrieNode:
    """
    One character position in the trie.

    Attributes
    ----------
    children : Dict[str, int]
        Next character -> arena index of the child node. One entry per
        distinct outgoing character.
    terminal : bool
        True when a complete word ends at this node.
    """
    children: Dict[str, int] = field(default_factory=dict)
    terminal: bool = False


@dataclass(frozen=True, slots=True)
class Correction:
    """A vocabulary word and its edit distance to the word being corrected."""
    word: str
    distance: int


@dataclass(frozen=True, slots=True)
class EditResult:
    """
    State of an editing session after the last event.

    Attributes
    ----------
    text : str
        The document text after autocorrect (if any) was applied.
    corrected : bool
        True when the trailing token was replaced by a correction.
    original_token : str
        The trailing token as typed, before correction.
    suggestions : Tuple[str, ...]
        Completions for the trailing token (at most SUGGEST_LIMIT).
    matches : Tuple[int, ...]
        Start offsets of the search pattern in ``text``, strictly increasing.
    current : int
        Index into ``matches`` of the selected match, or NO_SELECTION.
    """
    text: str
    corrected: bool = False
    original_token: str = ""
    suggestions: Tuple[str, ...] = ()
    matches: Tuple[int, ...] = ()
    current: int = -1

    def to_dict(self) -> dict:
        d = asdict(self)
        d["suggestions"] = list(self.suggestions)
        d["matches"] = list(self.matches)
        return d
