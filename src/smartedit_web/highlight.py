from __future__ import annotations
from typing import Iterable, List, Tuple

from markupsafe import Markup, escape


def merge_spans(matches: Iterable[int], length: int) -> List[Tuple[int, int]]:
    """Turn match offsets into [start, end) spans; only overlapping matches are joined."""
    spans: List[Tuple[int, int]] = []
    if length <= 0:
        return spans
    for start in matches:
        end = start + length
        if spans and start < spans[-1][1]:
            spans[-1] = (spans[-1][0], max(spans[-1][1], end))
        else:
            spans.append((start, end))
    return spans


def render_highlight(text: str, matches: Iterable[int], length: int, *, current: int = -1) -> Markup:
    """
    HTML for the preview pane: text escaped, matched regions wrapped in
    <mark class="match">. The span holding match number `current` also
    gets the "current" class.
    """
    matches = list(matches)
    cur_off = matches[current] if 0 <= current < len(matches) else None
    out: List[str] = []
    last = 0
    for start, end in merge_spans(matches, length):
        out.append(escape(text[last:start]))
        cls = "match current" if cur_off is not None and start <= cur_off < end else "match"
        out.append(Markup('<mark class="{}">{}</mark>').format(cls, text[start:end]))
        last = end
    out.append(escape(text[last:]))
    return Markup("").join(out)
