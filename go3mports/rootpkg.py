"""
Resolution of the "own" root package.

Everything imported from under this prefix counts as an internal import.
By default it is the two-level deep location of the working directory inside
GOPATH: $GOPATH/src/github.com/slomek/go3mports -> github.com/slomek.
Module-mode checkouts outside GOPATH fall back to the nearest go.mod.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .errors import (
    NoGopathError,
    OutsideGopathError,
    RootResolutionError,
    TooShallowError,
)

logger = logging.getLogger(__name__)

GO_MOD = "go.mod"

# Segments of the import path that make up the owner, e.g. host + user.
ROOT_DEPTH = 2


def _owner_prefix(import_path: str) -> str:
    parts = [p for p in import_path.split("/") if p]
    return "/".join(parts[:ROOT_DEPTH])


def root_from_gopath(cwd: Path, gopath: str) -> str:
    """
    Root prefix of cwd located under one of the GOPATH entries.

    Raises:
        NoGopathError: GOPATH is empty
        OutsideGopathError: cwd is not under any $GOPATH/src
        TooShallowError: cwd is less than two levels below $GOPATH/src
    """
    entries = [e for e in gopath.split(os.pathsep) if e]
    if not entries:
        raise NoGopathError()

    cwd = cwd.resolve()
    for entry in entries:
        src = Path(entry).resolve() / "src"
        try:
            rel = cwd.relative_to(src)
        except ValueError:
            continue
        if len(rel.parts) < ROOT_DEPTH:
            raise TooShallowError()
        return "/".join(rel.parts[:ROOT_DEPTH])

    raise OutsideGopathError()


def find_go_mod(start: Path) -> Optional[Path]:
    """Nearest go.mod in start or any of its parents."""
    start = start.resolve()
    for d in (start, *start.parents):
        candidate = d / GO_MOD
        if candidate.is_file():
            return candidate
    return None


def read_module_path(go_mod: Path) -> Optional[str]:
    """Module path declared by a go.mod file, None if there is no module directive."""
    try:
        content = go_mod.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to read {go_mod}: {e}")
        return None

    for line in content.splitlines():
        line = line.split("//", 1)[0].strip()
        if line.startswith("module "):
            value = line[len("module "):].strip().strip('"').strip("`")
            return value or None
    return None


def resolve_root_package(
    cwd: Path,
    env: Mapping[str, str],
    override: Optional[str] = None,
) -> str:
    """
    Determine what should be interpreted as an "own" package.

    Args:
        cwd: Working directory of the run
        env: Environment (GOPATH is read from it)
        override: Explicit prefix from the command line or config file

    Returns:
        Root prefix, e.g. "github.com/slomek"

    Raises:
        RootResolutionError: If the prefix cannot be determined
    """
    if override is not None:
        override = override.strip().strip("/")
        if not override:
            raise RootResolutionError("root package override is empty")
        logger.debug(f"Root package from override: {override}")
        return override

    gopath = env.get("GOPATH", "")
    try:
        root = root_from_gopath(cwd, gopath)
        logger.debug(f"Root package from GOPATH: {root}")
        return root
    except (NoGopathError, OutsideGopathError) as gopath_error:
        # Module mode: no GOPATH needed, go.mod names the module.
        go_mod = find_go_mod(cwd)
        module = read_module_path(go_mod) if go_mod else None
        if not module:
            raise gopath_error
        root = _owner_prefix(module)
        logger.debug(f"Root package from {go_mod}: {root}")
        return root


__all__ = [
    "GO_MOD",
    "ROOT_DEPTH",
    "root_from_gopath",
    "find_go_mod",
    "read_module_path",
    "resolve_root_package",
]
