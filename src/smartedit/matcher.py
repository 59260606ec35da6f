"""
Exact substring search (Knuth-Morris-Pratt).

find_all() is a pure function: it never mutates its inputs and keeps no
state between calls. Offsets come back strictly increasing, left to right,
and overlapping occurrences are all reported ("aaaa" / "aa" -> [0, 1, 2]).
"""

from __future__ import annotations
from typing import List


def failure_table(pattern: str) -> List[int]:
    """
    KMP partial-match table.

    fail[k-1] is the length of the longest proper prefix of pattern[:k]
    that is also a suffix of it, for k = 1..len(pattern).

    Examples:
        >>> failure_table("abab")
        [0, 0, 1, 2]
        >>> failure_table("aaa")
        [0, 1, 2]
    """
    fail = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[i] != pattern[k]:
            k = fail[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        fail[i] = k
    return fail


def find_all(text: str, pattern: str) -> List[int]:
    """
    Every start offset i with text[i:i+len(pattern)] == pattern.
    An empty pattern matches nothing and returns [].
    Runs in O(len(text) + len(pattern)); text characters are never re-read.
    """
    if not isinstance(text, str) or not isinstance(pattern, str):
        raise TypeError("find_all(): text and pattern must be str")
    m = len(pattern)
    if m == 0 or m > len(text):
        return []

    fail = failure_table(pattern)
    out: List[int] = []
    j = 0  # length of the currently matched prefix
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = fail[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            out.append(i - m + 1)
            j = fail[j - 1]  # keep the border so overlapping matches are found
    return out


class PatternMatcher:
    """Stateless object seam over find_all() for callers that inject a matcher."""

    @staticmethod
    def find_all(text: str, pattern: str) -> List[int]:
        return find_all(text, pattern)
