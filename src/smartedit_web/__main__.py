from __future__ import annotations
import argparse, json, sys
from smartedit import Engine
from smartedit.config import SUGGEST_LIMIT, MAX_DISTANCE

REPL_HELP = """\
Type text to feed the editor (each line replaces the document).
Commands:
  :find PATTERN   set the search pattern (":find" alone clears it)
  :next / :prev   move the current match
  :take WORD      accept a suggestion
  :show           print the current state
  empty line      exit"""


def _print_state(res, as_json: bool) -> None:
    if as_json:
        print(json.dumps(res.to_dict(), ensure_ascii=False))
        return
    flag = f"  (corrected {res.original_token!r})" if res.corrected else ""
    print(f"text:        {res.text!r}{flag}")
    print(f"suggestions: {', '.join(res.suggestions) or '-'}")
    n = len(res.matches)
    sel = f" — {res.current + 1}/{n}" if n else ""
    print(f"matches:     {list(res.matches)}{sel}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Smart editor CLI (Engine-backed)")
    p.add_argument("--words", nargs="+", default=[], help="Word-list files or folders to load")
    p.add_argument("--no-seed", action="store_true", help="Do not load the built-in seed words")
    p.add_argument("--suggest", metavar="PREFIX", default=None, help="Print completions for PREFIX")
    p.add_argument("--correct", metavar="WORD", default=None, help="Print the correction for WORD")
    p.add_argument("--find", nargs=2, metavar=("TEXT", "PATTERN"), default=None,
                   help="Print every offset of PATTERN in TEXT")
    p.add_argument("-k", type=int, default=SUGGEST_LIMIT, help="Max suggestions")
    p.add_argument("--max-distance", type=int, default=MAX_DISTANCE, help="Autocorrect threshold")
    p.add_argument("--repl", action="store_true", help="Interactive editing session")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.k < 0:
        p.error("-k must be >= 0")
    if args.max_distance < 0:
        p.error("--max-distance must be >= 0")

    eng = Engine()
    try:
        eng.build(roots=args.words, seed=not args.no_seed, verbose=args.verbose)

        def emit(value, human: str) -> None:
            print(json.dumps(value, ensure_ascii=False) if args.json else human)

        if args.suggest is not None:
            rows = eng.suggest(args.suggest, args.k)
            emit(rows, "\n".join(rows) if rows else "(no suggestions)")

        if args.correct is not None:
            fixed = eng.correct(args.correct, args.max_distance)
            emit({"word": args.correct, "corrected": fixed}, fixed)

        if args.find is not None:
            text, pattern = args.find
            offs = eng.find_all(text, pattern)
            emit(offs, " ".join(map(str, offs)) if offs else "(no matches)")

        if args.repl:
            s = eng.open_session(max_distance=args.max_distance, suggest_limit=args.k)
            print(REPL_HELP)
            while True:
                try:
                    line = input("> ")
                except (EOFError, KeyboardInterrupt):
                    break
                if not line:
                    break
                if line.startswith(":find"):
                    res = s.set_pattern(line[len(":find"):].strip())
                elif line == ":next":
                    s.next_match(); res = s.snapshot()
                elif line == ":prev":
                    s.previous_match(); res = s.snapshot()
                elif line.startswith(":take "):
                    res = s.accept_suggestion(line[len(":take "):].strip())
                elif line == ":show":
                    res = s.snapshot()
                else:
                    res = s.on_text_change(line)
                _print_state(res, args.json)

        return 0
    except (ValueError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
