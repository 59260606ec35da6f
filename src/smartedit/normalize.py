from __future__ import annotations
import re
from typing import Iterator, List

_WS = re.compile(r"\s+")
_WORD = re.compile(r"[^\W\d_]+")  # letters only

def normalize_word(s: str) -> str:
    """Lowercase only. No accent folding or other Unicode normalization."""
    return s.lower()

def split_tokens(text: str) -> List[str]:
    """
    Split on whitespace runs, keeping the edge tokens:
      "ab cd"  -> ["ab", "cd"]
      "ab cd " -> ["ab", "cd", ""]   (user just finished a word)
    """
    return _WS.split(text)

def last_token(text: str) -> str:
    """The text after the last whitespace run ("" if text ends in whitespace)."""
    return split_tokens(text)[-1]

def replace_last_token(text: str, new: str) -> str:
    """Replace exactly the trailing token; everything before it is untouched."""
    tail = last_token(text)
    return text[:len(text) - len(tail)] + new

def iter_words(text: str) -> Iterator[str]:
    """Yield lowercase alphabetic words of a free-form text (word-list files)."""
    for m in _WORD.finditer(text):
        yield normalize_word(m.group(0))
