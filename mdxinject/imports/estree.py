"""
Import extraction from ESTree metadata attached by the MDX parser.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from .model import ImportSpecifier


def specifiers_from_estree(program: Mapping[str, Any]) -> List[ImportSpecifier]:
    """
    Flatten every `ImportDeclaration` of an ESTree `Program` into specifiers.

    Statements of other types and declarations without a usable string
    source are ignored.
    """
    body = program.get("body")
    if not isinstance(body, list):
        return []

    out: List[ImportSpecifier] = []
    for stmt in body:
        if not isinstance(stmt, Mapping) or stmt.get("type") != "ImportDeclaration":
            continue
        source = stmt.get("source")
        value = source.get("value") if isinstance(source, Mapping) else None
        if not isinstance(value, str):
            continue
        for spec in stmt.get("specifiers") or []:
            local = spec.get("local") if isinstance(spec, Mapping) else None
            name = local.get("name") if isinstance(local, Mapping) else None
            if isinstance(name, str) and name:
                out.append(ImportSpecifier(local=name, source=value))
    return out


__all__ = ["specifiers_from_estree"]
