from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from . import Finding, MatchResult, NO_MATCH, PATTERN_DELIMITER, Stats, WILDCARD
from .store import tokenize

MULTI_LEVEL = "**"

def _lineno(index: int) -> int:
    # line 1 of the input is the pattern count
    return index + 2

def lint_duplicates(patterns: Sequence[str]) -> List[Finding]:
    """Same pattern listed more than once."""
    by_pattern: Dict[str, List[int]] = defaultdict(list)
    for i, p in enumerate(patterns):
        by_pattern[p].append(i)
    findings: List[Finding] = []
    for pattern, idx in by_pattern.items():
        if len(idx) > 1:
            findings.append(
                Finding(
                    severity="low",
                    code="DUPLICATE",
                    message=f"'{pattern}' appears {len(idx)} times. Suggestion: keep one.",
                    pattern=pattern,
                    lineno=_lineno(idx[1]),
                )
            )
    return findings

def lint_tokens(patterns: Sequence[str]) -> List[Finding]:
    """Tokens that do not behave the way they look: '**' and empty fields."""
    findings: List[Finding] = []
    for i, p in enumerate(patterns):
        if p == "":
            findings.append(Finding(
                severity="high", code="EMPTY_PATTERN",
                message="Empty pattern only matches an empty path.",
                pattern=p, lineno=_lineno(i),
            ))
            continue
        tokens = tokenize(p, PATTERN_DELIMITER)
        if MULTI_LEVEL in tokens:
            findings.append(Finding(
                severity="risky", code="LITERAL_DOUBLE_STAR",
                message=f"'{p}': '**' has no multi-level meaning and only matches a literal '**' segment.",
                pattern=p, lineno=_lineno(i),
            ))
        if "" in tokens:
            findings.append(Finding(
                severity="risky", code="EMPTY_TOKEN",
                message=f"'{p}' contains an empty field; it only matches paths with an empty segment there.",
                pattern=p, lineno=_lineno(i),
            ))
    return findings

def lint_catch_all(patterns: Sequence[str]) -> List[Finding]:
    """Patterns made only of wildcards: they match every path of their length."""
    findings: List[Finding] = []
    for i, p in enumerate(patterns):
        tokens = tokenize(p, PATTERN_DELIMITER)
        if tokens and all(t == WILDCARD for t in tokens):
            findings.append(Finding(
                severity="low", code="CATCH_ALL",
                message=f"'{p}' matches any path with {len(tokens)} segment(s).",
                pattern=p, lineno=_lineno(i),
            ))
    return findings

def lint_patterns(patterns: Sequence[str]) -> List[Finding]:
    findings: List[Finding] = []
    findings.extend(lint_duplicates(patterns))
    findings.extend(lint_tokens(patterns))
    findings.extend(lint_catch_all(patterns))
    return findings

def aggregate_stats(
    findings: Iterable[Finding],
    patterns: int,
    results: Sequence[MatchResult],
    ties: int = 0,
) -> Stats:
    high = low = risky = 0
    for f in findings:
        if f.severity == "high":
            high += 1
        elif f.severity == "low":
            low += 1
        else:
            risky += 1
    unmatched = sum(1 for r in results if r.best == NO_MATCH)
    return Stats(
        patterns=patterns, paths=len(results), matched=len(results) - unmatched,
        unmatched=unmatched, ties=ties, high=high, low=low, risky=risky,
    )
