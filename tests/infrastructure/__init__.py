"""
Unified test infrastructure for go3mports.

Modules:
- file_utils: creating files, Go projects and loading Go samples
- records: ImportRecord sequences laid out like gofmt output
- cli_utils: running the CLI in a subprocess
"""

from .file_utils import write, write_go_project, load_sample_code, RESOURCES
from .records import OWN_ROOT, records
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_go_project",
    "load_sample_code",
    "RESOURCES",
    "OWN_ROOT",
    "records",
    "run_cli",
    "jload",
]
