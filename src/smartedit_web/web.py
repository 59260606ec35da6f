from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from smartedit.engine import Engine
from smartedit.config import SUGGEST_LIMIT, MAX_DISTANCE
from .highlight import render_highlight

app = Flask(__name__)
_engine: Engine | None = None
log = logging.getLogger(__name__)


def _eng() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Start the app via main() or set _engine.")
    return _engine


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object body")
    return data


def _str_field(data: dict, key: str, default: str = "") -> str:
    v = data.get(key, default)
    if not isinstance(v, str):
        raise TypeError(f"'{key}' must be a string")
    return v


@app.errorhandler(ValueError)
@app.errorhandler(TypeError)
def _bad_request(exc):
    log.info("bad request on %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": True, **_eng().stats()})


@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", SUGGEST_LIMIT, type=int)
    if not q:
        return jsonify([])
    return jsonify(_eng().suggest(q, k))


@app.get("/api/correct")
def api_correct():
    w = request.args.get("w", "", type=str)
    d = request.args.get("d", MAX_DISTANCE, type=int)
    fixed = _eng().correct(w, d)
    return jsonify({"word": w, "corrected": fixed, "changed": fixed != w})


@app.post("/api/search")
def api_search():
    data = _json_body()
    text = _str_field(data, "text")
    pattern = _str_field(data, "pattern")
    matches = _eng().find_all(text, pattern) if pattern.strip() else []
    return jsonify({"matches": matches, "count": len(matches)})


@app.post("/api/highlight")
def api_highlight():
    data = _json_body()
    text = _str_field(data, "text")
    pattern = _str_field(data, "pattern")
    current = data.get("current", -1)
    matches = _eng().find_all(text, pattern) if pattern.strip() else []
    html = render_highlight(text, matches, len(pattern), current=int(current))
    return jsonify({"html": str(html), "count": len(matches)})


@app.post("/api/edit")
def api_edit():
    """
    Stateless editing step. The client sends the whole document each time:
      {text, pattern, action?, current?, word?}
    action: "type" (default; autocorrect + suggest), "search" (pattern changed,
    no autocorrect), "next", "prev", "accept".
    """
    data = _json_body()
    text = _str_field(data, "text")
    pattern = _str_field(data, "pattern")
    action = _str_field(data, "action", "type")

    s = _eng().open_session()
    s.set_pattern(pattern)
    if action == "type":
        res = s.on_text_change(text)
    elif action == "search":
        res = s.load_text(text)
    elif action in ("next", "prev"):
        s.load_text(text)
        s.select_match(int(data.get("current", 0)))
        if action == "next":
            s.next_match()
        else:
            s.previous_match()
        res = s.snapshot()
    elif action == "accept":
        s.load_text(text)
        res = s.accept_suggestion(_str_field(data, "word"))
    else:
        raise ValueError(f"unknown action: {action!r}")

    out = res.to_dict()
    out["html"] = str(render_highlight(res.text, res.matches, len(pattern), current=res.current))
    return jsonify(out)


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Smart Editor • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
  --mark-bg:rgba(110,231,255,.2);
  --cur-bg:rgba(255,200,80,.35);
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
.row{ display:flex; gap:12px; align-items:flex-start; }
textarea{
  flex:1; min-height:220px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font:14px ui-monospace,Menlo,Consolas,monospace;
}
textarea:focus, input:focus{ border-color:var(--accent) }
.side{ width:260px; display:flex; flex-direction:column; gap:8px; }
.side input{
  padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none;
}
.btn{
  padding:8px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent-2) }
.small{ color:var(--muted); font-size:13px }
.sugg{ padding:6px 8px; border:1px solid var(--border); border-radius:8px; cursor:pointer }
.sugg:hover{ background:#0d131a }
.preview{
  margin-top:16px; padding:12px; border-radius:12px; border:1px solid var(--border);
  white-space:pre-wrap; min-height:160px;
}
mark.match{ background:var(--mark-bg); color:inherit; border-bottom:1px solid var(--accent-2) }
mark.current{ background:var(--cur-bg) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Smart Editor — autocomplete • autocorrect • search</h1>
      <div class="row">
        <textarea id="text" placeholder="Type text...">Type here. Try words like 'ban', 'app', or misspell a word like 'recieve'.</textarea>
        <div class="side">
          <input id="pattern" type="text" placeholder="Search pattern" autocomplete="off" />
          <div style="display:flex; gap:6px">
            <button id="prev" class="btn">Prev</button>
            <button id="next" class="btn">Next</button>
          </div>
          <div id="count" class="small">Matches: 0</div>
          <div id="suggestions"></div>
        </div>
      </div>
      <div id="preview" class="preview"></div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const text = $("#text"), pattern = $("#pattern"), preview = $("#preview"), count = $("#count"), sugg = $("#suggestions");
let current = -1, t;

function render(r){
  if (text.value !== r.text) text.value = r.text;
  current = r.current;
  preview.innerHTML = r.html;
  const n = r.matches.length;
  count.textContent = n ? `Matches: ${n} — ${current + 1}/${n}` : "Matches: 0";
  sugg.innerHTML = "";
  r.suggestions.forEach(w => {
    const d = document.createElement("div");
    d.className = "sugg";
    d.textContent = `Do you want to type this? ${w}`;
    d.onclick = () => step("accept", w);
    sugg.appendChild(d);
  });
  const cur = preview.querySelector("mark.current");
  if (cur) cur.scrollIntoView({behavior:"smooth", block:"center"});
}

async function step(action, word){
  const body = {text:text.value, pattern:pattern.value, action, current};
  if (word) body.word = word;
  const resp = await fetch("/api/edit", {method:"POST", headers:{"Content-Type":"application/json"}, body:JSON.stringify(body)});
  if (resp.ok) render(await resp.json());
}
function debounced(action){ clearTimeout(t); t = setTimeout(() => step(action), 150); }

text.addEventListener("input", () => debounced("type"));
pattern.addEventListener("input", () => debounced("search"));
$("#next").addEventListener("click", () => step("next"));
$("#prev").addEventListener("click", () => step("prev"));
step("search");
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--words", nargs="+", default=[], help="Word-list files or folders")
    ap.add_argument("--no-seed", action="store_true", help="Do not load the built-in seed words")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.build(roots=args.words, seed=not args.no_seed, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
