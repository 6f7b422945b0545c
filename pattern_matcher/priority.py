from __future__ import annotations
from typing import Iterable, List, Tuple

from loguru import logger

from . import Candidate, MatchResult, NO_MATCH
from .matcher import find_matches, sanitize_path
from .store import PatternStore, build_store

def _resolve(store: PatternStore, tokens: List[str]) -> Tuple[str, List[Candidate]]:
    cohort = find_matches(tokens, store)
    if not cohort:
        return NO_MATCH, cohort
    # exact-first traversal of a tie-break store follows one branch, so it never ties
    if len(cohort) == 1 or store.tie_break:
        return cohort[0].pattern, cohort
    logger.debug("tie at {} wildcards between {}", cohort[0].wildcards, [c.pattern for c in cohort])
    tie_store = build_store((c.pattern for c in cohort), tie_break=True)
    best, _ = _resolve(tie_store, tokens)
    return best, cohort

def cohort_and_best(store: PatternStore, path: str) -> Tuple[List[Candidate], str]:
    """Minimum-wildcard cohort for a path plus the pattern chosen from it."""
    best, cohort = _resolve(store, sanitize_path(path))
    return cohort, best

def best_match(store: PatternStore, path: str) -> str:
    best, _ = _resolve(store, sanitize_path(path))
    return best

def best_matches(patterns: Iterable[str], paths: Iterable[str]) -> List[MatchResult]:
    store = build_store(patterns)
    return [MatchResult(path=p, best=best_match(store, p)) for p in paths]
