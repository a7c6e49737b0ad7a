from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, List, Literal, Optional


# ---- Imports ----

@dataclass(frozen=True)
class ImportRecord:
    """
    One import spec of a Go file, in file order.

    Offsets are byte offsets into the raw file contents; ``end`` is exclusive.
    ``start`` points at the spec itself (the alias, if any), ``end`` just past
    the closing quote of the path.
    """
    path: str  # unquoted, e.g. "github.com/pkg/errors"
    start: int
    end: int


class Category(enum.Enum):
    UNKNOWN = "unknown"  # empty group
    MIXED = "mixed"  # group-level only
    STDLIB = "stdlib"
    EXTERNAL = "external"
    INTERNAL = "internal"


# Ordered, non-empty run of positionally adjacent imports.
Group = List[ImportRecord]


# ---- Violations ----

ViolationKind = Literal["too_many_groups", "invalid_grouping", "duplicate_group_type"]


@dataclass(frozen=True)
class Violation(ABC):
    """
    Base of the closed set of grouping violations.

    Returned (never raised) by the validator; ``None`` means the file passed.
    """
    kind: ClassVar[ViolationKind]

    @property
    @abstractmethod
    def message(self) -> str:
        ...

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TooManyGroups(Violation):
    kind: ClassVar[ViolationKind] = "too_many_groups"

    count: int

    @property
    def message(self) -> str:
        return f"found {self.count} groups: too many import groups"


@dataclass(frozen=True)
class InvalidGrouping(Violation):
    """A single group holds imports of different categories."""
    kind: ClassVar[ViolationKind] = "invalid_grouping"

    group_index: int  # 0-based
    categories: FrozenSet[Category] = field(default_factory=frozenset)

    @property
    def message(self) -> str:
        names = ", ".join(sorted(c.value for c in self.categories))
        if not names:
            return "invalid grouping"
        return f"invalid grouping: group {self.group_index + 1} mixes {names} imports"


@dataclass(frozen=True)
class DuplicateGroupType(Violation):
    """Two groups hold imports of the same category."""
    kind: ClassVar[ViolationKind] = "duplicate_group_type"

    category: Category
    first_group: int  # 0-based
    second_group: int

    @property
    def message(self) -> str:
        return (
            f"multiple import groups of the same type: "
            f"groups {self.first_group + 1} and {self.second_group + 1} are both {self.category.value}"
        )


ValidationResult = Optional[Violation]


__all__ = [
    "ImportRecord",
    "Category",
    "Group",
    "Violation",
    "ViolationKind",
    "TooManyGroups",
    "InvalidGrouping",
    "DuplicateGroupType",
    "ValidationResult",
]
