"""
File helpers for tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

RESOURCES = Path(__file__).resolve().parent.parent / "resources"


def write(p: Path, text: str) -> Path:
    """
    Write text to a file, creating parent directories when needed.

    Args:
        p: File path
        text: Content to write

    Returns:
        Path of the written file
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_go_project(root: Path, files: Dict[str, str]) -> Path:
    """Write {relative path: source} under root and return root."""
    for rel, text in files.items():
        write(root / rel, text)
    return root


def load_sample_code(name: str) -> str:
    """Contents of tests/resources/go/<name>.go."""
    return (RESOURCES / "go" / f"{name}.go").read_text(encoding="utf-8")
