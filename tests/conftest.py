from pathlib import Path
from typing import Tuple

import pytest

from tests.infrastructure import load_sample_code, write_go_project


@pytest.fixture
def gopath_project(tmp_path: Path) -> Tuple[Path, Path]:
    """
    GOPATH with the sample project checked out at
    $GOPATH/src/github.com/slomek/go3mports.

    main.go is grouped correctly, example/example.go mixes third-party and own
    imports, performers.go has two stdlib groups. The vendored file would fail
    with too many groups if it were ever checked.

    Returns:
        (gopath, project directory)
    """
    gopath = tmp_path / "go"
    project = gopath / "src" / "github.com" / "slomek" / "go3mports"
    write_go_project(project, {
        "main.go": load_sample_code("three_groups"),
        "example/example.go": load_sample_code("example"),
        "example/performers/performers.go": load_sample_code("performers"),
        "vendor/github.com/pkg/errors/errors.go": load_sample_code("too_many_groups"),
        "README.md": "# sample\n",
    })
    return gopath, project


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    monkeypatch.delenv("GO3MPORTS_DEBUG", raising=False)
