"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from GoImportsUserError.

Import grouping violations are NOT exceptions: the analyzer returns them
as values (see go3mports.types), so that one bad file never stops a run.
"""

from __future__ import annotations


class GoImportsUserError(Exception):
    """
    Base class for all user-facing errors in go3mports.

    These errors indicate problems that the user can fix:
    configuration issues, unparsable files, a checkout outside GOPATH, etc.
    """
    pass


class ConfigError(GoImportsUserError, ValueError):
    """Invalid configuration file or command line override."""
    pass


class ExtractionError(GoImportsUserError):
    """
    A file could not be read or its import block could not be parsed.

    Reported for the offending file only; the run continues with the next file.
    """
    pass


class RootResolutionError(GoImportsUserError):
    """The "own" root package could not be determined. Fatal for the whole run."""
    pass


class NoGopathError(RootResolutionError):
    def __init__(self) -> None:
        super().__init__("GOPATH is not set")


class OutsideGopathError(RootResolutionError):
    def __init__(self) -> None:
        super().__init__("current directory is outside GOPATH")


class TooShallowError(RootResolutionError):
    def __init__(self) -> None:
        super().__init__("you need to be at least two level deep into GOPATH to check import grouping")


__all__ = [
    "GoImportsUserError",
    "ConfigError",
    "ExtractionError",
    "RootResolutionError",
    "NoGopathError",
    "OutsideGopathError",
    "TooShallowError",
]
