from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

NO_MATCH = "NO MATCH"
WILDCARD = "*"
PATTERN_DELIMITER = ","
PATH_DELIMITER = "/"

@dataclass(frozen=True)
class Candidate:
    pattern: str
    wildcards: int

@dataclass(frozen=True)
class MatchResult:
    path: str
    best: str

@dataclass(frozen=True)
class Finding:
    severity: Literal["high", "risky", "low"]
    code: str
    message: str
    pattern: str | None = None
    lineno: int | None = None

@dataclass(frozen=True)
class Stats:
    patterns: int = 0
    paths: int = 0
    matched: int = 0
    unmatched: int = 0
    ties: int = 0
    high: int = 0
    low: int = 0
    risky: int = 0
