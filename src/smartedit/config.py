from __future__ import annotations
import os

# /* ~~~ editing session tuning ~~~ */
SUGGEST_LIMIT: int = 3       # suggestions per text change
MAX_DISTANCE: int = 2        # autocorrect threshold (edit distance)
MIN_CORRECT_LEN: int = 2     # last token must be longer than this
NO_SELECTION: int = -1       # "current match" when nothing is selected

# seed vocabulary used by the CLI / web / GUI when --no-seed is not given
SEED_WORDS = [
    "apple", "application", "appetite",
    "banana", "band", "banner",
    "cat", "cater", "catalog",
    "receive",
]

# word-list loader
INCLUDE_EXTS = [".txt", ".lst", ".dic", ".words"]
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}
ENCODING: str = "utf-8"

# Progress logging (set SMARTEDIT_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SMARTEDIT_VERBOSE") == "1"
PROGRESS_EVERY_FILES = 500
