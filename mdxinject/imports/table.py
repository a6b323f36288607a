"""
Import table: local binding name → raw module path, for one document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from ..tree.model import EsmNode, Node
from .esm_parser import parse_esm_imports
from .estree import specifiers_from_estree
from .model import ImportSpecifier

logger = logging.getLogger(__name__)


@dataclass
class ImportTable:
    """
    Specifiers of all ESM nodes of a document, in declaration order.

    Built fresh for every transform call and never shared between documents.
    """
    specifiers: List[ImportSpecifier] = field(default_factory=list)

    def lookup(self, name: Optional[str]) -> Optional[str]:
        """Source of the first specifier bound to `name`, or None."""
        if not name:
            return None
        for spec in self.specifiers:
            if spec.local == name:
                return spec.source
        return None

    def __iter__(self) -> Iterator[ImportSpecifier]:
        return iter(self.specifiers)

    def __len__(self) -> int:
        return len(self.specifiers)


def specifiers_of(node: EsmNode) -> List[ImportSpecifier]:
    """
    Import bindings of a single ESM node.

    ESTree metadata wins when present; otherwise the raw text is parsed.
    A node without usable data yields an empty list.
    """
    program = node.estree
    if program is not None:
        return specifiers_from_estree(program)
    if node.value.strip():
        return parse_esm_imports(node.value)
    return []


def build_import_table(nodes: Iterable[Node]) -> ImportTable:
    table = ImportTable()
    for node in nodes:
        if not isinstance(node, EsmNode):
            continue
        found = specifiers_of(node)
        if not found:
            logger.debug("ESM node without import bindings skipped: %r", node.value[:80])
            continue
        table.specifiers.extend(found)
    return table


__all__ = ["ImportTable", "specifiers_of", "build_import_table"]
