from __future__ import annotations

from typing import FrozenSet, Iterable, List

from .model import Node, NodeKind

# Only these kinds take part in import lookup and component matching.
RELEVANT_KINDS: FrozenSet[NodeKind] = frozenset({NodeKind.ESM, NodeKind.JSX_FLOW})


def filter_nodes(children: Iterable[Node], kinds: FrozenSet[NodeKind] = RELEVANT_KINDS) -> List[Node]:
    """Order-preserving subsequence of `children` whose kind is in `kinds`."""
    return [node for node in children if node.kind in kinds]


__all__ = ["RELEVANT_KINDS", "filter_nodes"]
