"""
smartedit - typing assistance engines for a text editor.

Three engines plus a thin session layer:
- WordIndex (trie): prefix suggestions for the word being typed
- find_all (KMP): every occurrence of a search pattern in the document
- correct / SpellCorrector: nearest vocabulary word within an edit-distance threshold
- EditingSession: runs all three on each text / pattern change

Example Usage:
    from smartedit import WordIndex, EditingSession

    index = WordIndex(["apple", "application", "banana"])
    session = EditingSession(index)
    session.set_pattern("an")
    result = session.on_text_change("I ate a banan")
    print(result.text, result.suggestions, result.matches)
"""

# src/smartedit/__init__.py
from .trie import WordIndex, VocabularyView
from .matcher import PatternMatcher, find_all, failure_table
from .speller import SpellCorrector, correct, edit_distance
from .session import EditingSession
from .engine import Engine
from .models import Correction, EditResult

__version__ = "1.0.0"
__all__ = [
    "WordIndex", "VocabularyView",
    "PatternMatcher", "find_all", "failure_table",
    "SpellCorrector", "correct", "edit_distance",
    "EditingSession", "Engine",
    "Correction", "EditResult",
]
