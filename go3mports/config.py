"""
Optional run configuration from .go3mports.yaml.

All keys are optional; command line flags take precedence over the file.

    root: github.com/slomek      # own root package, skips GOPATH/go.mod lookup
    vendor: vendor               # top-level directory with vendored dependencies
    exclude: ["gen/", "*.pb.go"] # gitignore-style patterns of files to skip
    gitignore: true              # honour .gitignore of the checked directory
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

CONFIG_FILE = ".go3mports.yaml"
DEFAULT_VENDOR_DIR = "vendor"

_KNOWN_KEYS = {"root", "vendor", "exclude", "gitignore"}


@dataclass(frozen=True)
class CheckConfig:
    root: Optional[str] = None
    vendor: str = DEFAULT_VENDOR_DIR
    exclude: List[str] = field(default_factory=list)
    gitignore: bool = True

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> CheckConfig:
        """Build configuration from a YAML mapping, validating key by key."""
        if not d:
            return CheckConfig()

        unknown = sorted(set(d) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"{CONFIG_FILE}: unknown key(s): {', '.join(map(str, unknown))}")

        root = d.get("root")
        if root is not None and not isinstance(root, str):
            raise ConfigError(f"{CONFIG_FILE}: root: expected a string")

        vendor = d.get("vendor", DEFAULT_VENDOR_DIR)
        if not isinstance(vendor, str) or not vendor.strip("/"):
            raise ConfigError(f"{CONFIG_FILE}: vendor: expected a non-empty string")

        exclude = d.get("exclude", [])
        if exclude is None:  # `exclude:` with no value
            exclude = []
        if isinstance(exclude, str) and exclude.strip():
            exclude = [exclude]
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            raise ConfigError(f"{CONFIG_FILE}: exclude: expected a list of patterns")

        gitignore = d.get("gitignore", True)
        if not isinstance(gitignore, bool):
            raise ConfigError(f"{CONFIG_FILE}: gitignore: expected true or false")

        return CheckConfig(
            root=root,
            vendor=vendor.strip("/"),
            exclude=list(exclude),
            gitignore=gitignore,
        )

    def with_overrides(
        self,
        *,
        root: Optional[str] = None,
        vendor: Optional[str] = None,
        exclude: Optional[List[str]] = None,
        no_gitignore: bool = False,
    ) -> CheckConfig:
        """Apply command line flags on top of the file configuration."""
        cfg = self
        if root is not None:
            cfg = replace(cfg, root=root)
        if vendor is not None:
            if not vendor.strip("/"):
                raise ConfigError("--vendor: expected a non-empty directory name")
            cfg = replace(cfg, vendor=vendor.strip("/"))
        if exclude:
            cfg = replace(cfg, exclude=[*cfg.exclude, *exclude])
        if no_gitignore:
            cfg = replace(cfg, gitignore=False)
        return cfg


def _read_yaml_map(path: Path) -> dict:
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(cwd: Path, path: Optional[Path] = None) -> CheckConfig:
    """
    Load configuration.

    Args:
        cwd: Working directory, searched for .go3mports.yaml
        path: Explicit config file; must exist when given

    Returns:
        CheckConfig, defaults when no file is present
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = cwd / CONFIG_FILE
        if not path.is_file():
            logger.debug(f"No {CONFIG_FILE} in {cwd}, using defaults")
            return CheckConfig()

    logger.debug(f"Loading config from {path}")
    return CheckConfig.from_dict(_read_yaml_map(path))


__all__ = ["CONFIG_FILE", "DEFAULT_VENDOR_DIR", "CheckConfig", "load_config"]
