from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

from .analyzer import analyze
from .config import CheckConfig
from .errors import ExtractionError
from .extract import extract_imports, read_source
from .report import FileVerdict
from .walk import build_exclude_spec, build_gitignore_spec, iter_go_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    root_package: str
    cfg: CheckConfig = field(default_factory=CheckConfig)


def check_file(path: Path, root_package: str) -> FileVerdict:
    """
    Verdict for one file. Extraction problems are reported, not raised,
    so a single unparsable file does not stop the run.
    """
    try:
        records = extract_imports(read_source(path))
    except ExtractionError as e:
        logger.debug(f"{path}: extraction failed: {e}")
        return FileVerdict(path=path, error=str(e))

    violation = analyze(records, root_package)
    logger.debug(f"{path}: {len(records)} imports, verdict: {violation or 'ok'}")
    return FileVerdict(path=path, violation=violation)


def collect_files(start: Path, cfg: CheckConfig) -> Iterable[Path]:
    spec_git = build_gitignore_spec(start) if cfg.gitignore and start.is_dir() else None
    exclude = build_exclude_spec(cfg.exclude)
    return iter_go_files(start, vendor_dir=cfg.vendor, spec_git=spec_git, exclude=exclude)


def run_check(paths: Sequence[Path], options: RunOptions) -> List[FileVerdict]:
    """Check every Go file under the given paths, in walk order."""
    verdicts: List[FileVerdict] = []
    for start in paths:
        if not start.exists():
            verdicts.append(FileVerdict(path=start, error="failed to open file: no such file or directory"))
            continue
        for path in collect_files(start, options.cfg):
            verdicts.append(check_file(path, options.root_package))
    return verdicts


__all__ = ["RunOptions", "check_file", "collect_files", "run_check"]
