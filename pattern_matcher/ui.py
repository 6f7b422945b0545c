from __future__ import annotations
from typing import List
import streamlit as st
try:
    from . import Finding, NO_MATCH, Stats
    from .cli import run
    from .parser import InputError, parse_input
except ImportError:
    # `streamlit run pattern_matcher/ui.py` executes this file as a script
    import sys, pathlib
    ROOT = pathlib.Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(ROOT))
    from pattern_matcher import Finding, NO_MATCH, Stats
    from pattern_matcher.cli import run
    from pattern_matcher.parser import InputError, parse_input

st.set_page_config(page_title="Best Pattern Matcher", layout="wide", initial_sidebar_state="expanded")

_EXAMPLE_PATTERNS = "*,b,*\na,*,*\n*,*,c\nfoo,bar,baz\nw,x,*,*\nt,r,e,w\nw,*,y,z"
_EXAMPLE_PATHS = "/w/x/y/z/\na/b/c\nfoo/\nfoo/bar/\nfoo/bar/baz/"

def _lines(text: str) -> List[str]:
    return [ln.strip() for ln in (text or "").splitlines()]

def _render_stats(stats: Stats) -> None:
    st.sidebar.markdown("### Statistics")
    st.sidebar.write(f"- Patterns: {stats.patterns}")
    st.sidebar.write(f"- Paths: {stats.paths}")
    st.sidebar.write(f"- Matched: {stats.matched}")
    st.sidebar.write(f"- No match: {stats.unmatched}")
    st.sidebar.write(f"- Ties resolved: {stats.ties}")
    st.sidebar.write(f"- High / risky / low findings: {stats.high} / {stats.risky} / {stats.low}")

def _render_findings(findings: List[Finding], severity_filter: str) -> None:
    visible = findings if severity_filter == "all" else [f for f in findings if f.severity == severity_filter]
    if not visible:
        st.success("No findings.")
        return
    for f in visible:
        loc = f" (pattern #{f.lineno - 1})" if f.lineno else ""
        msg = f"[{f.severity}] {f.code}: {f.message}{loc}"
        if f.severity == "high":
            st.error(msg)
        elif f.severity == "risky":
            st.warning(msg)
        else:
            st.info(msg)

# ---------------- sidebar ----------------

st.sidebar.title("Best Pattern Matcher")
source = st.sidebar.radio("Input", ["Separate boxes", "Raw input file"], index=0)
severity = st.sidebar.selectbox("Severity", ["all", "high", "risky", "low"], index=0)
st.sidebar.markdown("---")

if source == "Raw input file":
    uploaded = st.sidebar.file_uploader("Upload input (.txt)", type=["txt"], key="uploader")
    if uploaded and st.sidebar.button("Load file", use_container_width=True):
        st.session_state["raw_text"] = uploaded.read().decode("utf-8", errors="replace")

if "stats" not in st.session_state:
    st.session_state["stats"] = Stats()
_render_stats(st.session_state["stats"])

# ---------------- main page ----------------

st.header("Best Pattern Matching")

patterns: List[str] = []
paths: List[str] = []
if source == "Separate boxes":
    c1, c2 = st.columns(2)
    with c1:
        patterns_text = st.text_area("Patterns (one per line, comma separated)",
                                     value=st.session_state.get("patterns_text", _EXAMPLE_PATTERNS), height=300)
        st.session_state["patterns_text"] = patterns_text
    with c2:
        paths_text = st.text_area("Paths (one per line, slash separated)",
                                  value=st.session_state.get("paths_text", _EXAMPLE_PATHS), height=300)
        st.session_state["paths_text"] = paths_text
    patterns, paths = _lines(patterns_text), _lines(paths_text)
else:
    raw_text = st.text_area("Input (count, patterns, count, paths)",
                            value=st.session_state.get("raw_text", ""), height=360, key="raw_editor")
    st.session_state["raw_text"] = raw_text

if st.button("Match", type="primary"):
    try:
        if source == "Raw input file":
            patterns, paths = parse_input(st.session_state["raw_text"])
    except InputError as e:
        st.error(f"Malformed input: {e}")
        st.stop()

    results, stats, findings = run(patterns, paths)
    st.session_state["stats"] = stats
    _render_stats(stats)

    st.subheader("Results")
    st.table([{"path": r.path, "best": r.best} for r in results])
    if stats.unmatched:
        st.caption(f"{stats.unmatched} path(s) returned {NO_MATCH}.")

    st.subheader("Findings")
    _render_findings(findings, severity)
else:
    st.info("Enter patterns and paths, then click **Match**.")
