from __future__ import annotations

# Public API:
#  • analyze — pass/fail verdict for one file's ordered import records
#  • PathClassifier — path -> Category, given the "own" root prefix
#  • build_groups / validate_groups — the two halves of analyze
from .analyzer import analyze
from .classify import PathClassifier
from .groups import build_groups, validate_groups
from .types import (
    Category,
    DuplicateGroupType,
    ImportRecord,
    InvalidGrouping,
    TooManyGroups,
    Violation,
)

__all__ = [
    "analyze",
    "PathClassifier",
    "build_groups",
    "validate_groups",
    "Category",
    "ImportRecord",
    "Violation",
    "TooManyGroups",
    "InvalidGrouping",
    "DuplicateGroupType",
]
