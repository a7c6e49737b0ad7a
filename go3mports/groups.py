"""
Splitting a file's imports into blank-line separated groups and validating them.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .classify import PathClassifier
from .types import (
    Category,
    DuplicateGroupType,
    Group,
    ImportRecord,
    InvalidGrouping,
    TooManyGroups,
    Violation,
)

# Two imports on consecutive lines are separated by a newline plus the
# indentation tab (gofmt layout). Anything wider means a blank line in between.
GROUP_GAP = 2

# One group per category at most: stdlib, third-party, own.
MAX_GROUPS = 3


def build_groups(records: Iterable[ImportRecord]) -> List[Group]:
    """
    Partition imports (in file order) into groups.

    A record starts a new group when the distance from the end of the
    previous record exceeds GROUP_GAP. Order is preserved and every
    record lands in exactly one group.
    """
    groups: List[Group] = []
    for rec in records:
        if not groups or rec.start - groups[-1][-1].end > GROUP_GAP:
            groups.append([rec])
            continue
        groups[-1].append(rec)
    return groups


def group_category(group: Group, classifier: PathClassifier) -> Category:
    """Category shared by all imports of the group, MIXED if they differ."""
    if not group:
        return Category.UNKNOWN

    first = classifier.classify(group[0].path)
    for rec in group[1:]:
        if classifier.classify(rec.path) != first:
            return Category.MIXED
    return first


def validate_groups(groups: List[Group], classifier: PathClassifier) -> Optional[Violation]:
    """
    Check a file's groups against the grouping rules.

    Returns:
        None if the grouping is valid, otherwise the first violation found:
        TooManyGroups, then InvalidGrouping, then DuplicateGroupType.
    """
    if len(groups) > MAX_GROUPS:
        return TooManyGroups(count=len(groups))

    # A single group has nothing to be misordered against.
    if len(groups) <= 1:
        return None

    categories: List[Category] = []
    for idx, group in enumerate(groups):
        cat = group_category(group, classifier)
        if cat is Category.MIXED:
            seen = frozenset(classifier.classify(rec.path) for rec in group)
            return InvalidGrouping(group_index=idx, categories=seen)
        categories.append(cat)

    used: Dict[Category, int] = {}
    for idx, cat in enumerate(categories):
        if cat in used:
            return DuplicateGroupType(category=cat, first_group=used[cat], second_group=idx)
        used[cat] = idx

    return None


__all__ = ["GROUP_GAP", "MAX_GROUPS", "build_groups", "group_category", "validate_groups"]
