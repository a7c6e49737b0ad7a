"""
Tree-sitter infrastructure for the Go import extractor.
Provides grammar loading, query management, and utilities for AST parsing.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple, Union

from tree_sitter import Tree, Node, Parser, Query, Language, QueryCursor


class GoDocument:
    """
    Go source parsed with Tree-sitter, with a named query system.

    All positions handed out by this class are byte offsets into the
    source bytes, the same unit Go's own token positions use.
    """

    def __init__(self, source: Union[str, bytes]):
        # Raw bytes are parsed as they are, so offsets match the file on disk
        self._text_bytes = source if isinstance(source, bytes) else source.encode("utf-8")
        self.tree: Optional[Tree] = None
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    @staticmethod
    def get_language() -> Language:
        """Language instance for the bundled Go grammar."""
        import tree_sitter_go as tsgo
        return Language(tsgo.language())

    @staticmethod
    def get_query_definitions() -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = Parser(self.get_language())
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples, sorted by position

        Raises:
            ValueError: If query is not defined
        """
        root_node = self.root_node

        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        # Matches of different patterns may interleave
        results.sort(key=lambda item: (item[0].start_byte, item[0].end_byte))
        return results

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Walk the tree using TreeCursor for efficient traversal.

        Args:
            start_node: Node to start from (default: root)

        Yields:
            Node objects in depth-first order
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def get_line_range(node: Node) -> Tuple[int, int]:
        """Get line range (0-based) for a node."""
        return node.start_point[0], node.end_point[0]

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """All ERROR and missing nodes, in document order."""
        if not self.has_error():
            return []
        return [n for n in self.walk_tree() if n.type == "ERROR" or n.is_missing]


__all__ = ["GoDocument", "Node"]
