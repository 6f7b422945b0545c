from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, TextIO, Tuple

from loguru import logger

from . import Finding, MatchResult, Stats
from .lints import aggregate_stats, lint_patterns
from .logger import setup_logger
from .parser import InputError, parse_input
from .priority import cohort_and_best
from .store import build_store

class _Palette:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    BRIGHT_CYAN = "\033[96m"
    GREY = "\033[90m"

def _should_color(mode: str, stream: TextIO) -> bool:
    """Decide if we should emit ANSI colors on stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())

def _clr(enabled: bool, text: str, *styles: str) -> str:
    if not enabled or not styles:
        return text
    return "".join(styles) + text + _Palette.RESET

def _filter_findings(findings: List[Finding], severity: str) -> List[Finding]:
    if severity == "all":
        return findings
    return [f for f in findings if f.severity == severity]

def run(patterns: List[str], paths: List[str]) -> Tuple[List[MatchResult], Stats, List[Finding]]:
    """Match every path and collect the lint findings and run statistics."""
    store = build_store(patterns)
    results: List[MatchResult] = []
    ties = 0
    for p in paths:
        cohort, best = cohort_and_best(store, p)
        if len(cohort) > 1:
            ties += 1
        results.append(MatchResult(path=p, best=best))
    findings = lint_patterns(patterns)
    stats = aggregate_stats(findings, patterns=len(patterns), results=results, ties=ties)
    logger.info("{} paths matched, {} unmatched, {} ties resolved", stats.matched, stats.unmatched, stats.ties)
    return results, stats, findings

def _print_report(stats: Stats, findings: List[Finding], color: bool) -> None:
    H = _Palette
    err = sys.stderr
    print(_clr(color, "Statistics", H.BRIGHT_CYAN, H.BOLD), file=err)
    for k, v in stats.__dict__.items():
        print(f"{_clr(color, f'- {k}:', H.GREY)} {_clr(color, str(v), H.BOLD)}", file=err)
    print(file=err)
    print(_clr(color, "Findings:", H.BRIGHT_CYAN), file=err)
    if not findings:
        print(_clr(color, "- none", H.GREY), file=err)
    for f in findings:
        if f.severity == "high":
            tag = _clr(color, "[high]", H.RED, H.BOLD)
        elif f.severity == "risky":
            tag = _clr(color, "[risky]", H.YELLOW, H.BOLD)
        else:
            tag = _clr(color, "[low]", H.BLUE)
        loc = f" (line {f.lineno})" if f.lineno else ""
        print(f"- {tag} {f.code}: {f.message}{loc}", file=err)

def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Pick the best wildcard pattern for each path")
    ap.add_argument("--file", type=Path, help="Input file (default: stdin)")
    ap.add_argument("--json", action="store_true", help="Emit JSON instead of one line per path")
    ap.add_argument("--lint", action="store_true", help="Report pattern findings and statistics on stderr")
    ap.add_argument("--severity", choices=["all", "high", "risky", "low"], default="all",
                    help="Filter which findings are shown (stats are unaffected).")
    ap.add_argument("--color", choices=["auto", "always", "never"], default="auto",
                    help="Colorize the lint report (default: auto)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    ap.add_argument("--debug", action="store_true", help="Log tree building and tie-breaks")
    args = ap.parse_args(argv)

    setup_logger(verbose=args.verbose, debug=args.debug)

    try:
        text = args.file.read_text(encoding="utf-8", errors="replace") if args.file else sys.stdin.read()
    except OSError as e:
        logger.error("Cannot read input: {}", e)
        return 1

    try:
        patterns, paths = parse_input(text)
    except InputError as e:
        logger.error("Malformed input: {}", e)
        return 2

    results, stats, findings = run(patterns, paths)
    visible = _filter_findings(findings, args.severity)

    if args.json:
        payload = {
            "severity": args.severity,
            "stats": stats.__dict__,
            "results": [r.__dict__ for r in results],
            "findings": [f.__dict__ for f in visible],
        }
        print(json.dumps(payload, indent=2))
        return 0

    for r in results:
        print(r.best)
    if args.lint:
        _print_report(stats, visible, _should_color(args.color, sys.stderr))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
