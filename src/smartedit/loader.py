from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List

from . import config as CFG
from .normalize import iter_words

log = logging.getLogger(__name__)


def _iter_word_files(roots: Iterable[str]) -> Iterator[str]:
    """Yield word-list files: roots that are files, and matching files under root dirs."""
    exts = tuple(e.lower() for e in CFG.INCLUDE_EXTS)
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        if not os.path.isdir(root):
            log.warning("word root not found: %s", root)
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            # prune in place so os.walk skips them
            dirnames[:] = sorted(d for d in dirnames if d not in CFG.EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if fn.lower().endswith(exts):
                    yield os.path.join(dirpath, fn)


def iter_vocabulary(roots: Iterable[str]) -> Iterator[str]:
    """Yield lowercase words from every word-list file under `roots` (may repeat)."""
    file_count = 0
    for path in _iter_word_files(roots):
        try:
            with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
                for line in f:
                    yield from iter_words(line)
        except OSError as exc:
            log.warning("skipping unreadable word list %s: %s", path, exc)
            continue
        file_count += 1
        if CFG.VERBOSE and file_count % CFG.PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d", file_count)
    if CFG.VERBOSE:
        log.info("[done] files=%d", file_count)


def load_words(roots: Iterable[str]) -> List[str]:
    """Scan roots for word lists and return the distinct words, sorted."""
    return sorted(set(iter_vocabulary(roots)))
