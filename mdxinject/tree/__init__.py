from .filter import RELEVANT_KINDS, filter_nodes
from .jsonic import dump_tree, load_tree
from .model import (
    EsmNode,
    GenericNode,
    JsxAttribute,
    JsxElement,
    Node,
    NodeKind,
    Root,
    node_from_dict,
)

__all__ = [
    "RELEVANT_KINDS",
    "filter_nodes",
    "load_tree",
    "dump_tree",
    "EsmNode",
    "GenericNode",
    "JsxAttribute",
    "JsxElement",
    "Node",
    "NodeKind",
    "Root",
    "node_from_dict",
]
