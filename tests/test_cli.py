"""
End-to-end CLI tests: the module mostly runs in a subprocess inside a temporary GOPATH.
"""

import pytest

from go3mports.cli import main
from tests.infrastructure import jload, run_cli, write


def test_reports_failing_files(gopath_project):
    gopath, project = gopath_project
    cp = run_cli(project, env={"GOPATH": str(gopath)})

    assert cp.returncode == 1, cp.stderr
    lines = cp.stdout.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("example/example.go: invalid grouping")
    assert lines[1].startswith("example/performers/performers.go: multiple import groups of the same type")
    # main.go is fine, vendor/ is never checked
    assert not any(line.startswith("main.go") for line in lines)
    assert "vendor" not in cp.stdout


def test_clean_tree_exits_zero(gopath_project):
    gopath, project = gopath_project
    cp = run_cli(project, "main.go", env={"GOPATH": str(gopath)})
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == ""


def test_root_resolution_failure_is_fatal(tmp_path, monkeypatch, capsys):
    write(tmp_path / "main.go", "package main\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GOPATH", raising=False)
    # go.mod lookup walks up to the filesystem root
    monkeypatch.setattr("go3mports.rootpkg.find_go_mod", lambda start: None)
    monkeypatch.setattr("go3mports.cli.run_check", lambda *a, **kw: pytest.fail("files checked without a root"))

    assert main([]) == 1
    out, err = capsys.readouterr()
    assert "Failed to determine root package: GOPATH is not set" in err
    assert out == ""


def test_root_override_from_flag(tmp_path):
    write(tmp_path / "a.go", 'package a\n\nimport (\n\t"fmt"\n\n\t"example.com/acme/x"\n)\n')
    cp = run_cli(tmp_path, "--root", "example.com/acme", env={"GOPATH": ""})
    assert cp.returncode == 0, cp.stdout + cp.stderr


def test_config_file(tmp_path):
    write(tmp_path / ".go3mports.yaml", "root: example.com/acme\nexclude: ['bad/']\n")
    write(tmp_path / "bad" / "b.go", 'package b\n\nimport (\n\t"fmt"\n\n\t"os"\n)\n')
    write(tmp_path / "ok.go", 'package ok\n\nimport "fmt"\n')
    cp = run_cli(tmp_path, env={"GOPATH": ""})
    assert cp.returncode == 0, cp.stdout + cp.stderr


def test_invalid_config_is_usage_error(tmp_path):
    write(tmp_path / ".go3mports.yaml", "unknown: 1\n")
    cp = run_cli(tmp_path, "--root", "example.com/acme")
    assert cp.returncode == 2
    assert "unknown key" in cp.stderr


def test_unparsable_file_fails_only_itself(tmp_path):
    write(tmp_path / "a_broken.go", "import \"fmt\"\n")
    write(tmp_path / "b_bad.go", 'package b\n\nimport (\n\t"fmt"\n\n\t"os"\n)\n')
    cp = run_cli(tmp_path, "--root", "example.com/acme")
    assert cp.returncode == 1
    assert cp.stdout.splitlines() == [
        "a_broken.go: failed to parse file: expected 'package' clause",
        "b_bad.go: multiple import groups of the same type: groups 1 and 2 are both stdlib",
    ]


def test_json_report(gopath_project):
    gopath, project = gopath_project
    cp = run_cli(project, "--json", env={"GOPATH": str(gopath)})

    assert cp.returncode == 1
    data = jload(cp.stdout)
    assert data["rootPackage"] == "github.com/slomek"
    assert data["filesChecked"] == 3
    assert [f["kind"] for f in data["failures"]] == ["invalid_grouping", "duplicate_group_type"]


def test_debug_logs_go_to_stderr(gopath_project):
    gopath, project = gopath_project
    cp = run_cli(project, "--debug", "main.go", env={"GOPATH": str(gopath)})
    assert cp.returncode == 0
    assert cp.stdout == ""
    assert "[DEBUG] Root package from GOPATH: github.com/slomek" in cp.stderr


def test_missing_path(tmp_path):
    cp = run_cli(tmp_path, "nope.go", "--root", "example.com/acme")
    assert cp.returncode == 1
    assert cp.stdout.startswith("nope.go: failed to open file")


def test_version(tmp_path):
    cp = run_cli(tmp_path, "--version")
    assert cp.returncode == 0
    assert cp.stdout.startswith("go3mports ")
