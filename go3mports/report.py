"""
Per-file verdicts and their aggregation into output and an exit status.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .types import Violation, ViolationKind

FailureKind = Union[ViolationKind, Literal["extraction_error"]]

EXIT_OK = 0
EXIT_FAILED = 1


@dataclass(frozen=True)
class FileVerdict:
    path: Path
    violation: Optional[Violation] = None
    error: Optional[str] = None  # extraction failure message

    @property
    def ok(self) -> bool:
        return self.violation is None and self.error is None

    @property
    def kind(self) -> Optional[FailureKind]:
        if self.error is not None:
            return "extraction_error"
        if self.violation is not None:
            return self.violation.kind
        return None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error
        if self.violation is not None:
            return self.violation.message
        return ""

    def display_path(self) -> str:
        return self.path.as_posix()


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    kind: FailureKind
    message: str


class RunReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    root_package: str = Field(alias="rootPackage")
    files_checked: int = Field(alias="filesChecked")
    failures: List[Failure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def format_line(verdict: FileVerdict) -> str:
    """Report line of a failing file: "<path>: <message>"."""
    return f"{verdict.display_path()}: {verdict.message}"


def text_lines(verdicts: Sequence[FileVerdict]) -> List[str]:
    return [format_line(v) for v in verdicts if not v.ok]


def build_report(root_package: str, verdicts: Sequence[FileVerdict]) -> RunReport:
    failures = [
        Failure(path=v.display_path(), kind=v.kind, message=v.message)
        for v in verdicts
        if not v.ok
    ]
    return RunReport(root_package=root_package, files_checked=len(verdicts), failures=failures)


def exit_status(verdicts: Sequence[FileVerdict]) -> int:
    return EXIT_OK if all(v.ok for v in verdicts) else EXIT_FAILED


__all__ = [
    "EXIT_OK",
    "EXIT_FAILED",
    "FileVerdict",
    "Failure",
    "RunReport",
    "format_line",
    "text_lines",
    "build_report",
    "exit_status",
]
