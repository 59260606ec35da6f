"""Presentation surfaces for smartedit: Flask JSON API + editor page, and the CLI."""
from __future__ import annotations
from .web import app, main
from .highlight import render_highlight, merge_spans

__all__ = ["app", "main", "render_highlight", "merge_spans"]
