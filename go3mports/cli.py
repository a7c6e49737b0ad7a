from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List

from .config import CONFIG_FILE, load_config
from .engine import RunOptions, run_check
from .errors import ConfigError, GoImportsUserError, RootResolutionError
from .report import EXIT_FAILED, build_report, exit_status, text_lines
from .rootpkg import resolve_root_package
from .version import tool_version

EXIT_USAGE = 2


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or os.environ.get("GO3MPORTS_DEBUG") else logging.WARNING
    log = logging.getLogger("go3mports")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="go3mports",
        description="Check that Go imports are split into stdlib, third-party and own groups",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="files or directories to check (default: current directory)",
    )
    p.add_argument(
        "--root",
        metavar="PREFIX",
        help="own root package, e.g. github.com/slomek (default: derived from GOPATH or go.mod)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"configuration file (default: ./{CONFIG_FILE} if present)",
    )
    p.add_argument(
        "--vendor",
        metavar="DIR",
        help="top-level directory with vendored dependencies to skip (default: vendor)",
    )
    p.add_argument(
        "--exclude",
        action="append",
        metavar="PATTERN",
        help="gitignore-style pattern of paths to skip (can be given several times)",
    )
    p.add_argument(
        "--no-gitignore",
        action="store_true",
        help="do not skip files ignored by .gitignore",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="print a JSON report instead of one line per failing file",
    )
    p.add_argument(
        "-d", "--debug",
        action="store_true",
        help="debug logging to stderr",
    )
    return p


def main(argv: List[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.debug)

    cwd = Path.cwd()
    try:
        cfg = load_config(cwd, Path(ns.config) if ns.config else None).with_overrides(
            root=ns.root,
            vendor=ns.vendor,
            exclude=ns.exclude,
            no_gitignore=ns.no_gitignore,
        )
    except ConfigError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_USAGE

    # Without a root nothing can be classified: stop before touching any file.
    try:
        root_package = resolve_root_package(cwd, os.environ, override=cfg.root)
    except RootResolutionError as e:
        sys.stderr.write(f"Failed to determine root package: {e}\n")
        return EXIT_FAILED

    try:
        verdicts = run_check([Path(p) for p in ns.paths], RunOptions(root_package=root_package, cfg=cfg))
    except GoImportsUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_FAILED

    if ns.json:
        report = build_report(root_package, verdicts)
        sys.stdout.write(json.dumps(report.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2) + "\n")
    else:
        for line in text_lines(verdicts):
            sys.stdout.write(line + "\n")

    return exit_status(verdicts)


if __name__ == "__main__":
    raise SystemExit(main())
