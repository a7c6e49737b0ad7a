"""
Go import path classification.

Three categories only: standard library, third-party ("external") and the
project's own packages ("internal"). Deliberately a heuristic, not a lookup
against the Go toolchain: standard library paths have no domain-like segment,
so any path without a dot is treated as stdlib.
"""

from __future__ import annotations

from .types import Category


class PathClassifier:
    """Classifies import paths against a fixed "own" root prefix."""

    def __init__(self, own_root: str):
        """
        Args:
            own_root: Prefix identifying own packages, e.g. "github.com/slomek".
        """
        self.own_root = own_root

    def classify(self, path: str) -> Category:
        """
        Classify a raw (unquoted) import path.

        Known limitation: a third-party path without a dot is reported
        as stdlib, and a stdlib-like path with a dot as external.
        """
        if "." not in path:
            return Category.STDLIB

        if path.startswith(self.own_root):
            return Category.INTERNAL

        return Category.EXTERNAL

    def __repr__(self) -> str:
        return f"PathClassifier(own_root={self.own_root!r})"


__all__ = ["PathClassifier"]
