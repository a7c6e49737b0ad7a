"""
Go import extraction using the Tree-sitter AST.

Produces the ordered ImportRecord list the analyzer works on. Like Go's
"imports only" parse mode, only the file header (package clause and the
import declarations before the first other declaration) is looked at;
the rest of the file is ignored, syntax errors included.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .errors import ExtractionError
from .tree_sitter_support import GoDocument, Node
from .types import ImportRecord

# Top-level nodes that may appear before the first real declaration
_HEADER_NODES = {"package_clause", "import_declaration", "comment", "ERROR"}


def read_source(path: Path) -> bytes:
    """Raw file contents; offsets into them are what the gap check measures."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise ExtractionError(f"failed to open file: {e}") from e


def _unquote(literal: str) -> str:
    # "fmt" or `fmt`
    if len(literal) >= 2 and literal[0] == literal[-1] and literal[0] in ('"', "`"):
        return literal[1:-1]
    return literal


def _header_limit(doc: GoDocument) -> int:
    """Start of the first top-level declaration that is not an import."""
    for child in doc.root_node.children:
        if child.type not in _HEADER_NODES:
            return child.start_byte
    return doc.root_node.end_byte


def _header_end(doc: GoDocument, limit: int) -> int:
    """End of the package clause or of the last header import declaration, whichever is later."""
    end = 0
    for node, _ in doc.query("package"):
        end = max(end, node.end_byte)
    for node, _ in doc.query("import_declarations"):
        if node.start_byte < limit:
            end = max(end, node.end_byte)
    return end


def _is_broken_import(node: Node) -> bool:
    # Recovery may leave an unterminated `import (` as a bare ERROR node
    return node.type == "ERROR" and node.child_count > 0 and node.children[0].type == "import"


def _check_header(doc: GoDocument, limit: int) -> None:
    """Raise ExtractionError on syntax errors within the package/import header."""
    if not doc.query("package"):
        raise ExtractionError("failed to parse file: expected 'package' clause")

    header_end = _header_end(doc, limit)
    for err in doc.get_errors():
        if err.start_byte <= header_end or (err.start_byte < limit and _is_broken_import(err)):
            line, _ = doc.get_line_range(err)
            raise ExtractionError(f"failed to parse file: syntax error at line {line + 1}")


def _record(doc: GoDocument, spec: Node) -> ImportRecord:
    path_node = spec.child_by_field_name("path")
    if path_node is None:
        raise ExtractionError("failed to parse file: import spec without path")
    return ImportRecord(
        path=_unquote(doc.get_node_text(path_node)),
        start=spec.start_byte,
        end=path_node.end_byte,
    )


def extract_imports(source: Union[str, bytes]) -> List[ImportRecord]:
    """
    Ordered import records of a Go source file.

    Args:
        source: File contents; bytes are used as is, text is UTF-8 encoded first

    Raises:
        ExtractionError: If the package clause or import block does not parse.
    """
    doc = GoDocument(source)
    limit = _header_limit(doc)
    _check_header(doc, limit)

    # Imports after the first other declaration are not part of the header
    return [
        _record(doc, node)
        for node, capture in doc.query("imports")
        if capture == "import_spec" and node.start_byte < limit
    ]


__all__ = ["read_source", "extract_imports"]
