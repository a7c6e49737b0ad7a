from __future__ import annotations

from typing import Iterable, Optional

from .classify import PathClassifier
from .groups import build_groups, validate_groups
from .types import ImportRecord, Violation


def analyze(records: Iterable[ImportRecord], own_root: str) -> Optional[Violation]:
    """
    Verdict for one file: None when its imports are grouped correctly.

    Pure function of its arguments; no I/O, no logging.
    """
    groups = build_groups(records)
    return validate_groups(groups, PathClassifier(own_root))


__all__ = ["analyze"]
