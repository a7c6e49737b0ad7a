from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

logger = logging.getLogger(__name__)

GO_EXT = ".go"


def build_gitignore_spec(root: Path) -> Optional[pathspec.PathSpec]:
    """
    Build PathSpec from .gitignore. Return None if .gitignore is missing.
    """
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    try:
        text = gitignore.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.warning(f"Failed to read .gitignore: {e}")
        return None
    lines = []
    for ln in text.splitlines():
        ln = ln.strip()
        if ln and not ln.startswith("#"):
            lines.append(ln)
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def build_exclude_spec(patterns: List[str]) -> Optional[pathspec.PathSpec]:
    if not patterns:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns)


def is_go_file(name: str) -> bool:
    return name.endswith(GO_EXT) and not name.startswith(".")


def iter_go_files(
    root: Path,
    *,
    vendor_dir: str = "vendor",
    spec_git: Optional[pathspec.PathSpec] = None,
    exclude: Optional[pathspec.PathSpec] = None,
) -> Iterable[Path]:
    """
    Recursive *.go iterator with early directory pruning.

    The top-level vendor directory and .git are never entered; .gitignore and
    exclude patterns are matched against POSIX paths relative to root.
    Yielded paths keep the form of root (relative roots give relative paths).
    """
    if root.is_file():
        yield root
        return

    def ignored(rel_posix: str) -> bool:
        if spec_git and spec_git.match_file(rel_posix):
            return True
        if exclude and exclude.match_file(rel_posix):
            return True
        return False

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(os.path.relpath(dirpath, root)).as_posix()
        rel_dir = "" if rel_dir == "." else rel_dir + "/"

        keep: List[str] = []
        for d in sorted(dirnames):
            if d == ".git":
                continue
            if not rel_dir and d == vendor_dir:
                logger.debug(f"Skipping vendor directory: {Path(dirpath, d)}")
                continue
            if ignored(f"{rel_dir}{d}/"):
                logger.debug(f"Skipping ignored directory: {Path(dirpath, d)}")
                continue
            keep.append(d)
        # in-place, so os.walk does not descend into pruned branches
        dirnames[:] = keep

        for fn in sorted(filenames):
            if not is_go_file(fn):
                continue
            if ignored(rel_dir + fn):
                logger.debug(f"Skipping ignored file: {Path(dirpath, fn)}")
                continue
            yield Path(dirpath, fn)


__all__ = ["GO_EXT", "build_gitignore_spec", "build_exclude_spec", "is_go_file", "iter_go_files"]
