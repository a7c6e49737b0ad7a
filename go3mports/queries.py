"""
Tree-sitter query definitions for Go import extraction.
"""

from __future__ import annotations

QUERIES = {
    # Package clause (a Go file must start with one)
    "package": """
    (package_clause) @package
    """,

    # Whole import declarations: `import "fmt"` or `import ( ... )`
    "import_declarations": """
    (import_declaration) @import
    """,

    # Individual specs inside them; aliases, dot and blank imports included
    "imports": """
    (import_spec
      path: (_) @import_path) @import_spec
    """,
}
