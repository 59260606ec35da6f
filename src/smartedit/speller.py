from __future__ import annotations
import logging
from typing import AbstractSet, Iterable, List, Optional

from .config import MAX_DISTANCE
from .models import Correction
from .normalize import normalize_word

log = logging.getLogger(__name__)


def edit_distance(a: str, b: str, cutoff: Optional[int] = None) -> int:
    """
    Levenshtein distance (single-character insert / delete / substitute),
    two-row dynamic programming, O(len(a) * len(b)).

    With `cutoff`, the computation stops as soon as the distance is known to
    exceed it and returns cutoff + 1; results <= cutoff are exact.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    la, lb = len(a), len(b)
    if cutoff is not None and la - lb > cutoff:
        return cutoff + 1
    if lb == 0:
        return la

    prev = list(range(lb + 1))
    for i in range(1, la + 1):
        ca = a[i - 1]
        cur = [i] + [0] * lb
        for j in range(1, lb + 1):
            cur[j] = min(
                prev[j] + 1,                     # delete
                cur[j - 1] + 1,                  # insert
                prev[j - 1] + (ca != b[j - 1]),  # substitute
            )
        if cutoff is not None and min(cur) > cutoff:
            return cutoff + 1
        prev = cur
    d = prev[lb]
    if cutoff is not None and d > cutoff:
        return cutoff + 1
    return d


def _check_max_distance(max_distance: int) -> None:
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise TypeError(f"correct(): max_distance must be int, got {type(max_distance).__name__}")
    if max_distance < 0:
        raise ValueError(f"correct(): max_distance must be >= 0, got {max_distance}")


def _enumeration(vocabulary: Iterable[str]) -> List[str]:
    # fixed order for tie-breaks: lexicographic on the lowercase form
    return sorted(vocabulary, key=lambda v: (normalize_word(v), v))


def best_candidate(word: str, vocabulary: Iterable[str]) -> Optional[Correction]:
    """
    Nearest vocabulary entry to `word` (case-insensitive), before any threshold.
    Ties go to the first entry in lexicographic order. None for an empty
    vocabulary.
    """
    w = normalize_word(word)
    best: Optional[Correction] = None
    for entry in _enumeration(vocabulary):
        # only a strictly smaller distance can replace the current best
        cut = None if best is None else best.distance - 1
        if cut is not None and cut < 0:
            break
        d = edit_distance(w, normalize_word(entry), cutoff=cut)
        if best is None or d < best.distance:
            best = Correction(word=entry, distance=d)
    return best


def correct(word: str, vocabulary: AbstractSet[str], max_distance: int = MAX_DISTANCE) -> str:
    """
    Return the closest vocabulary word to `word`, or `word` itself when
      * it is already in the vocabulary (any casing),
      * the vocabulary is empty or `word` is empty,
      * the closest entry is more than `max_distance` edits away.
    The returned correction keeps the vocabulary's stored spelling.
    """
    if not isinstance(word, str):
        raise TypeError(f"correct(): word must be str, got {type(word).__name__}")
    _check_max_distance(max_distance)
    if not word or word in vocabulary:
        return word

    cand = best_candidate(word, vocabulary)
    if cand is None or cand.distance == 0:
        return word
    if cand.distance > max_distance:
        log.debug("correct(%r): nearest %r at %d > %d, leaving as is",
                  word, cand.word, cand.distance, max_distance)
        return word
    log.debug("correct(%r) -> %r (distance=%d)", word, cand.word, cand.distance)
    return cand.word


class SpellCorrector:
    """
    Nearest-match corrector bound to one vocabulary.
    `vocabulary` is expected to be a read-only view (WordIndex.vocabulary), so
    words inserted into the index later are seen here too.
    """
    def __init__(self, vocabulary: AbstractSet[str], max_distance: int = MAX_DISTANCE) -> None:
        _check_max_distance(max_distance)
        self.vocabulary = vocabulary
        self.max_distance = max_distance

    def correct(self, word: str, max_distance: Optional[int] = None) -> str:
        d = self.max_distance if max_distance is None else max_distance
        return correct(word, self.vocabulary, d)

    def nearest(self, word: str) -> Optional[Correction]:
        return best_candidate(word, self.vocabulary)
