# smartedit/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional

from . import config as CFG
from . import loader
from .matcher import find_all
from .session import EditingSession
from .speller import correct
from .trie import WordIndex

log = logging.getLogger(__name__)


class Engine:
    """
    Thin lifecycle layer used by the CLI, the Flask app and the desktop GUI:
      - vocabulary loading (seed list, explicit words, word-list files),
      - one WordIndex per engine,
      - editing sessions bound to that index.

    Public API:
      * build(roots, ...): seed + load -> fresh WordIndex
      * open_session():    EditingSession over this engine's index
      * suggest / correct / find_all: direct calls into the engines
      * shutdown():        drop the index
    Separate Engine instances never share a vocabulary.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[WordIndex] = None

    # /* ~~~ Build a vocabulary from seed words + word lists ~~~ */
    def build(
        self,
        roots: Iterable[str] = (),
        *,
        words: Optional[Iterable[str]] = None,
        seed: bool = True,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["SMARTEDIT_VERBOSE"] = "1"
            CFG.VERBOSE = True

        idx = WordIndex()
        if seed:
            idx.insert_many(CFG.SEED_WORDS)
        if words is not None:
            idx.insert_many(words)

        roots = list(roots)
        if roots:
            log.info("Loading word lists from %s", roots)
            added = idx.insert_many(loader.iter_vocabulary(roots))
            log.info("Loaded %d new words from word lists", added)

        self.index = idx
        log.info("Engine build() complete: words=%d nodes=%d", len(idx), idx.node_count)

    # ------------- query -------------

    def open_session(self, **kwargs) -> EditingSession:
        return EditingSession(self._require_index(), **kwargs)

    def suggest(self, prefix: str, limit: int = CFG.SUGGEST_LIMIT) -> List[str]:
        return self._require_index().suggest(prefix, limit)

    def correct(self, word: str, max_distance: int = CFG.MAX_DISTANCE) -> str:
        return correct(word, self._require_index().vocabulary, max_distance)

    def find_all(self, text: str, pattern: str) -> List[int]:
        # no vocabulary needed; kept here so callers only deal with Engine
        return find_all(text, pattern)

    def stats(self) -> dict:
        idx = self._require_index()
        return {"words": len(idx), "nodes": idx.node_count}

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> WordIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.index
