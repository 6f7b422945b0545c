from __future__ import annotations
import re
from typing import List, Optional, TextIO, Tuple

from loguru import logger

_COUNT = re.compile(r"^\s*[+-]?\d+\s*$")

class InputError(ValueError):
    """Malformed pattern/path input (bad or missing header, short pattern section)."""

def _count(line: str) -> Optional[int]:
    return int(line) if _COUNT.match(line) else None

def parse_input(text: str) -> Tuple[List[str], List[str]]:
    """
    Split line-oriented input into (patterns, paths):
      line 1        number of patterns N
      next N lines  patterns
      next line     number of paths (optional; skipped when numeric)
      remainder     paths
    The path count is recognised only when that line is all digits, so a
    headerless input whose first path is digits only (e.g. "2024") loses that
    path to the header. Patterns and paths are whitespace-trimmed.
    """
    lines = (text or "").splitlines()
    if not lines:
        raise InputError("Empty input: expected a pattern count on line 1.")

    n = _count(lines[0])
    if n is None:
        raise InputError(f"Line 1: pattern count must be an integer, got {lines[0].strip()!r}.")
    if n < 0:
        raise InputError(f"Line 1: pattern count must not be negative, got {n}.")
    if len(lines) - 1 < n:
        raise InputError(f"Expected {n} pattern lines, found {len(lines) - 1}.")

    patterns = [ln.strip() for ln in lines[1:n + 1]]
    rest = lines[n + 1:]

    declared = _count(rest[0]) if rest else None
    if declared is not None:
        rest = rest[1:]
    paths = [ln.strip() for ln in rest]

    if declared is not None and declared != len(paths):
        logger.warning("Line {}: path count says {}, found {} paths.", n + 2, declared, len(paths))
    logger.debug("parsed {} patterns, {} paths", len(patterns), len(paths))
    return patterns, paths

def read_input(stream: TextIO) -> Tuple[List[str], List[str]]:
    return parse_input(stream.read())
