from __future__ import annotations
from typing import List, Sequence, Tuple

from . import Candidate, PATH_DELIMITER, PATTERN_DELIMITER, WILDCARD
from .store import Node, PatternStore, tokenize

Found = Tuple[Candidate, ...]

def sanitize_path(path: str) -> List[str]:
    """Drop leading/trailing '/' runs, then split. Inner empty segments are kept."""
    return tokenize(path.strip(PATH_DELIMITER), PATH_DELIMITER)

def _record(found: Found, candidate: Candidate) -> Found:
    """
    Keep only the lowest wildcard count seen so far:
      - first candidate is always kept
      - a candidate no worse than some kept one evicts the worse ones and joins
      - a candidate worse than all kept ones is dropped
    """
    if not found:
        return (candidate,)
    if any(candidate.wildcards <= c.wildcards for c in found):
        return tuple(c for c in found if c.wildcards <= candidate.wildcards) + (candidate,)
    return found

def _walk(tokens: Sequence[str], node: Node, wildcards: int, found: Found, tie_break: bool) -> Found:
    if not tokens:
        if not node.is_terminal:
            return found
        return _record(found, Candidate(pattern=node.pattern, wildcards=wildcards))  # type: ignore[arg-type]

    head, rest = tokens[0], tokens[1:]
    exact = node.children.get(head)
    wild = node.children.get(WILDCARD)

    # a literal '*' in the path reaches the wildcard child only once
    if exact is not None and exact.is_wildcard:
        exact = None

    if exact is not None and wild is not None and not tie_break:
        found = _walk(rest, exact, wildcards, found, tie_break)
        return _walk(rest, wild, wildcards + 1, found, tie_break)
    if exact is not None:
        return _walk(rest, exact, wildcards, found, tie_break)
    if wild is not None:
        return _walk(rest, wild, wildcards + 1, found, tie_break)
    return found

def find_matches(tokens: Sequence[str], store: PatternStore) -> List[Candidate]:
    """
    All patterns that consume every token and end on a terminal node, pruned to
    those sharing the minimum wildcard count. Exact branches are listed before
    wildcard branches.
    """
    return list(_walk(tokens, store.root, 0, (), store.tie_break))

def wildcard_count(pattern: str) -> int:
    return sum(1 for t in tokenize(pattern, PATTERN_DELIMITER) if t == WILDCARD)
