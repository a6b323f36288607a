"""
Tree-sitter fallback for ESM blocks that come without ESTree metadata.

Parses the raw `import ...` text with the JavaScript grammar and extracts
default, namespace and named import bindings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from tree_sitter import Language, Node, Parser, Query, QueryCursor

from .model import ImportSpecifier

QUERIES = {
    "imports": """
    (import_statement) @import
    """,
}


@lru_cache(maxsize=1)
def _language() -> Language:
    import tree_sitter_javascript as tsjs
    return Language(tsjs.language())


@lru_cache(maxsize=None)
def _query(name: str) -> Query:
    return Query(_language(), QUERIES[name])


class EsmDocument:
    """
    Parsed ESM source with the queries needed for import extraction.
    """

    def __init__(self, text: str):
        self.text = text
        self._text_bytes = text.encode("utf-8")
        self.tree = Parser(_language()).parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    def node_text(self, node: Node) -> str:
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def query(self, query_name: str) -> List[Node]:
        """Nodes captured by a named query, in document order."""
        cursor = QueryCursor(_query(query_name))
        nodes: List[Node] = []
        for _pattern_index, captures in cursor.matches(self.root_node):
            for captured in captures.values():
                nodes.extend(captured)
        nodes.sort(key=lambda n: n.start_byte)
        return nodes

    def import_specifiers(self) -> List[ImportSpecifier]:
        out: List[ImportSpecifier] = []
        for stmt in self.query("imports"):
            # Broken statements are skipped one by one, the rest still count.
            if stmt.has_error:
                continue
            out.extend(self._statement_specifiers(stmt))
        return out

    def _statement_specifiers(self, stmt: Node) -> List[ImportSpecifier]:
        source_node = stmt.child_by_field_name("source")
        if source_node is None:
            return []
        source = self.node_text(source_node)[1:-1]

        locals_: List[str] = []
        for clause in stmt.named_children:
            if clause.type != "import_clause":
                continue
            for part in clause.named_children:
                if part.type == "identifier":
                    locals_.append(self.node_text(part))
                elif part.type == "namespace_import":
                    ident = _first_of_type(part, "identifier")
                    if ident is not None:
                        locals_.append(self.node_text(ident))
                elif part.type == "named_imports":
                    for spec in part.named_children:
                        if spec.type != "import_specifier":
                            continue
                        local = spec.child_by_field_name("alias") or spec.child_by_field_name("name")
                        if local is not None and local.type == "identifier":
                            locals_.append(self.node_text(local))

        return [ImportSpecifier(local=name, source=source) for name in locals_]


def _first_of_type(node: Node, type_name: str) -> Optional[Node]:
    for child in node.named_children:
        if child.type == type_name:
            return child
    return None


def parse_esm_imports(text: str) -> List[ImportSpecifier]:
    return EsmDocument(text).import_specifiers()


__all__ = ["EsmDocument", "parse_esm_imports", "QUERIES"]
