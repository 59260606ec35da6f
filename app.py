# app.py
# CustomTkinter GUI for the smart editor (dark theme).
# - Type in the editor: last word is autocorrected, completions are offered.
# - Search box: every match is highlighted, Prev/Next walk through them.
# - Extra word lists can be loaded from a folder or file (background thread).

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src or pip install -e .)
from smartedit import Engine, EditingSession, EditResult

PLACEHOLDER = "Type here. Try words like 'ban', 'app', or misspell a word like 'recieve'."


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def match_label(res: EditResult) -> str:
    n = len(res.matches)
    return f"Matches: {n} — {res.current + 1}/{n}" if n else "Matches: 0"


# -------------------- main app --------------------

class EditorApp(ctk.CTk):
    """Dark-themed editor wired to an EditingSession."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Smart Editor")
        self.geometry("960x680")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._engine.build()
        self._session: EditingSession = self._engine.open_session()
        self._extra_roots: List[str] = []
        self._loading_thread: Optional[threading.Thread] = None
        self._edit_after_id: Optional[str] = None
        self._applying = False  # guards against our own text rewrites

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # editor
        self.grid_rowconfigure(3, weight=1)  # preview

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_editor()
        self._build_preview()

        self._set_editor_text(PLACEHOLDER)
        self._render(self._session.load_text(PLACEHOLDER))
        self._set_status(f"{len(self._engine.index)} words")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Smart Editor — autocomplete • autocorrect • search", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        btn_folder = ctk.CTkButton(bar, text="Word Folder", command=self._choose_folder)
        btn_folder.grid(row=0, column=0, padx=(12, 6), pady=10)

        btn_file = ctk.CTkButton(bar, text="Word File", command=self._choose_file)
        btn_file.grid(row=0, column=1, padx=(0, 6), pady=10, sticky="w")

        self.lbl_source = ctk.CTkLabel(bar, text="Seed vocabulary", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_editor(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(0, weight=1)

        self.txt_editor = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_editor.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=12)
        self.txt_editor.bind("<KeyRelease>", self._on_text_changed)

        side = ctk.CTkFrame(frame, corner_radius=8, width=260)
        side.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=12)

        self.entry_pattern = ctk.CTkEntry(side, placeholder_text="Search pattern")
        self.entry_pattern.pack(fill="x", padx=8, pady=(8, 4))
        self.entry_pattern.bind("<KeyRelease>", self._on_pattern_changed)

        nav = ctk.CTkFrame(side, fg_color="transparent")
        nav.pack(fill="x", padx=8, pady=4)
        ctk.CTkButton(nav, text="Prev", width=60, command=self._prev).pack(side="left", padx=(0, 4))
        ctk.CTkButton(nav, text="Next", width=60, command=self._next).pack(side="left")

        self.lbl_matches = ctk.CTkLabel(side, text="Matches: 0", anchor="w")
        self.lbl_matches.pack(fill="x", padx=8, pady=4)

        self.suggest_box = ctk.CTkFrame(side, fg_color="transparent")
        self.suggest_box.pack(fill="x", padx=8, pady=(4, 8))

    def _build_preview(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Preview", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_preview = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_preview.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_preview.tag_config("match", background="#1f4f5c")
        self.txt_preview.tag_config("current", background="#8a6d1f")
        self.txt_preview.configure(state="disabled")

    # --------- editing events ---------

    def _on_text_changed(self, _ev=None) -> None:
        if self._applying:
            return
        # debounce for smoother typing
        if self._edit_after_id is not None:
            try:
                self.after_cancel(self._edit_after_id)
            except ValueError:
                pass
        self._edit_after_id = self.after(160, self._apply_text)

    def _apply_text(self) -> None:
        self._edit_after_id = None
        text = self._editor_text()
        res = self._session.on_text_change(text)
        if res.text != text:
            self._set_editor_text(res.text)
        self._render(res)

    def _on_pattern_changed(self, _ev=None) -> None:
        self._render(self._session.set_pattern(self.entry_pattern.get()))

    def _next(self) -> None:
        self._session.next_match()
        self._render(self._session.snapshot())

    def _prev(self) -> None:
        self._session.previous_match()
        self._render(self._session.snapshot())

    def _take_suggestion(self, word: str) -> None:
        res = self._session.accept_suggestion(word)
        self._set_editor_text(res.text)
        self._render(res)
        self.txt_editor.focus_set()

    # --------- word-list loading (threaded) ---------

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose word-list folder")
        if path:
            self._start_loading(path)

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose word list",
            filetypes=[("Word lists", "*.txt *.lst *.dic *.words"), ("All files", "*.*")]
        )
        if path:
            self._start_loading(path)

    def _start_loading(self, source: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "Word lists are already loading. Please wait.")
            return

        self.lbl_source.configure(text=f"Seed + {shorten_path(source)}")
        self._set_status("Loading words…")
        self.progress.start()

        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(source,), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, source: str) -> None:
        # build a separate engine; the live one is swapped on the UI thread
        roots = self._extra_roots + [source]
        try:
            eng = Engine()
            eng.build(roots=roots)
        except (OSError, ValueError) as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(eng, roots))

    def _on_load_ok(self, eng: Engine, roots: List[str]) -> None:
        self.progress.stop()
        self._engine.shutdown()
        self._engine = eng
        self._extra_roots = roots
        pattern = self._session.pattern
        self._session = eng.open_session()
        self._session.set_pattern(pattern)
        self._render(self._session.load_text(self._editor_text()))
        self._set_status(f"{len(eng.index)} words")

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading words.")
        mb.showerror("Load error", f"Failed to load word lists.\n{exc!r}")

    # --------- rendering ---------

    def _render(self, res: EditResult) -> None:
        self.lbl_matches.configure(text=match_label(res))

        for child in self.suggest_box.winfo_children():
            child.destroy()
        for word in res.suggestions:
            ctk.CTkButton(
                self.suggest_box, text=f"Do you want to type this? {word}", anchor="w",
                command=lambda w=word: self._take_suggestion(w),
            ).pack(fill="x", pady=2)

        plen = len(self._session.pattern)
        self.txt_preview.configure(state="normal")
        self.txt_preview.delete("0.0", "end")
        self.txt_preview.insert("end", res.text)
        for i, off in enumerate(res.matches):
            start, end = f"1.0+{off}c", f"1.0+{off + plen}c"
            self.txt_preview.tag_add("current" if i == res.current else "match", start, end)
        if res.current >= 0:
            self.txt_preview.see(f"1.0+{res.matches[res.current]}c")
        self.txt_preview.configure(state="disabled")

    # --------- misc UI helpers ---------

    def _editor_text(self) -> str:
        # Tk always keeps a trailing newline in text widgets
        return self.txt_editor.get("0.0", "end-1c")

    def _set_editor_text(self, text: str) -> None:
        self._applying = True
        try:
            self.txt_editor.delete("0.0", "end")
            self.txt_editor.insert("end", text)
        finally:
            self._applying = False

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = EditorApp()
    app.mainloop()
