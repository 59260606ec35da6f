from __future__ import annotations
import logging
from typing import List, Optional

from . import config as CFG
from .matcher import find_all
from .models import EditResult
from .normalize import last_token, replace_last_token
from .speller import SpellCorrector
from .trie import WordIndex

log = logging.getLogger(__name__)


class EditingSession:
    """
    Glue between the presentation layer and the three engines.

    The session does not own a vocabulary: it is handed a WordIndex and
    builds its SpellCorrector over that index's read-only vocabulary view,
    so autocomplete and autocorrect always see the same words.

    Events:
      * on_text_change(text)  - autocorrect last token, suggest, re-match
      * set_pattern(pattern)  - re-match
      * next_match() / previous_match() - cyclic navigation
      * accept_suggestion(word) - replace last token, append a space
    Each returns the resulting EditResult snapshot.
    """

    def __init__(
        self,
        index: WordIndex,
        *,
        max_distance: int = CFG.MAX_DISTANCE,
        suggest_limit: int = CFG.SUGGEST_LIMIT,
        min_correct_len: int = CFG.MIN_CORRECT_LEN,
    ) -> None:
        self.index = index
        self.corrector = SpellCorrector(index.vocabulary, max_distance=max_distance)
        self.suggest_limit = suggest_limit
        self.min_correct_len = min_correct_len

        self.text: str = ""
        self.pattern: str = ""
        self.suggestions: List[str] = []
        self.matches: List[int] = []
        self.current: int = CFG.NO_SELECTION
        self._last_corrected = False
        self._last_token = ""

    # ------------- events -------------

    def on_text_change(self, text: str) -> EditResult:
        if not isinstance(text, str):
            raise TypeError(f"on_text_change(): text must be str, got {type(text).__name__}")
        token = last_token(text)
        corrected = False

        if len(token) > self.min_correct_len:
            fixed = self.corrector.correct(token)
            if fixed != token:
                text = replace_last_token(text, fixed)
                corrected = True
                log.debug("autocorrect %r -> %r", token, fixed)
            # suggestions are for the token as typed, corrected or not
            self.suggestions = self.index.suggest(token, self.suggest_limit)
        else:
            self.suggestions = []

        self.text = text
        self._last_corrected = corrected
        self._last_token = token
        self._rematch()
        return self.snapshot()

    def set_pattern(self, pattern: str) -> EditResult:
        if not isinstance(pattern, str):
            raise TypeError(f"set_pattern(): pattern must be str, got {type(pattern).__name__}")
        self.pattern = pattern
        self._rematch()
        return self.snapshot()

    def load_text(self, text: str) -> EditResult:
        """Replace the document without autocorrect (opening a file, restoring state)."""
        if not isinstance(text, str):
            raise TypeError(f"load_text(): text must be str, got {type(text).__name__}")
        self.text = text
        self.suggestions = []
        self._last_corrected = False
        self._last_token = ""
        self._rematch()
        return self.snapshot()

    def accept_suggestion(self, word: str) -> EditResult:
        """Replace the token being typed with `word` and start a new word."""
        self.text = replace_last_token(self.text, word) + " "
        self.suggestions = []
        self._last_corrected = False
        self._last_token = ""
        self._rematch()
        return self.snapshot()

    # ------------- navigation -------------

    def next_match(self) -> int:
        return self._step(+1)

    def previous_match(self) -> int:
        return self._step(-1)

    def select_match(self, current: int) -> int:
        """
        Restore a selection (e.g. sent back by a stateless client); clamps to range.
        NO_SELECTION is kept as is, so the next step lands on the first or last match.
        """
        n = len(self.matches)
        if not n or int(current) == CFG.NO_SELECTION:
            self.current = CFG.NO_SELECTION
        else:
            self.current = min(max(int(current), 0), n - 1)
        return self.current

    # ------------- state -------------

    def current_offset(self) -> Optional[int]:
        """Text offset of the selected match, or None."""
        if self.current == CFG.NO_SELECTION:
            return None
        return self.matches[self.current]

    def snapshot(self) -> EditResult:
        return EditResult(
            text=self.text,
            corrected=self._last_corrected,
            original_token=self._last_token,
            suggestions=tuple(self.suggestions),
            matches=tuple(self.matches),
            current=self.current,
        )

    # ------------- internals -------------

    def _rematch(self) -> None:
        if not self.pattern.strip():
            self.matches = []
            self.current = CFG.NO_SELECTION
            return
        self.matches = find_all(self.text, self.pattern)
        self.current = 0 if self.matches else CFG.NO_SELECTION

    def _step(self, delta: int) -> int:
        n = len(self.matches)
        if not n:
            self.current = CFG.NO_SELECTION
        elif self.current == CFG.NO_SELECTION:
            self.current = 0 if delta > 0 else n - 1
        else:
            self.current = (self.current + delta) % n
        return self.current
