from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from loguru import logger

from . import PATTERN_DELIMITER, WILDCARD

def tokenize(text: str, delimiter: str) -> List[str]:
    """Split on a single delimiter; empty input has no tokens, empty fields are kept."""
    if text == "":
        return []
    return text.split(delimiter)

@dataclass
class Node:
    """One position in the pattern tree.

    Attributes:
        token: Token that led here from the parent (None for the root).
        children: Child nodes keyed by exact token.
        pattern: Original pattern string if a pattern ends here.
    """
    token: Optional[str] = None
    children: Dict[str, "Node"] = field(default_factory=dict)
    pattern: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.pattern is not None

    @property
    def is_wildcard(self) -> bool:
        return self.token == WILDCARD

class PatternStore:
    """Prefix tree of comma-tokenized patterns.

    With ``tie_break`` set, traversal follows an exact child whenever one
    exists and ignores a sibling wildcard child. That mode is only used to
    re-resolve an already tied set of candidates.

    Example:
        store = PatternStore()
        store.insert("a,*,*")
        store.insert("*,b,*")
        store.pattern_count()  # 2
    """

    def __init__(self, tie_break: bool = False):
        self.root = Node()
        self.tie_break = tie_break

    def insert(self, pattern: str) -> None:
        node = self.root
        for token in tokenize(pattern, PATTERN_DELIMITER):
            if token not in node.children:
                node.children[token] = Node(token=token)
            node = node.children[token]
        # equal token sequences only come from equal strings
        node.pattern = pattern

    def contains(self, pattern: str) -> bool:
        node = self.root
        for token in tokenize(pattern, PATTERN_DELIMITER):
            if token not in node.children:
                return False
            node = node.children[token]
        return node.is_terminal

    def node_count(self) -> int:
        """Number of nodes in the tree, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def pattern_count(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                count += 1
            stack.extend(node.children.values())
        return count

def build_store(patterns: Iterable[str], tie_break: bool = False) -> PatternStore:
    store = PatternStore(tie_break=tie_break)
    for p in patterns:
        store.insert(p)
    # counting walks the tree; only do it when DEBUG is enabled
    logger.opt(lazy=True).debug("built {} store: {} patterns, {} nodes",
                                lambda: "tie-break" if tie_break else "pattern",
                                store.pattern_count, store.node_count)
    return store
