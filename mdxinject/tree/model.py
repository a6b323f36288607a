"""
Document tree model.

A thin typed layer over the mdast/MDX tree as it is serialized to JSON by
remark. Only the node kinds the injector cares about get their own classes;
everything else is kept as a raw mapping so that a load → transform → dump
cycle never loses information.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Union


class NodeKind(str, Enum):
    """Closed set of node kinds known to the transform."""
    ROOT = "root"
    ESM = "mdxjsEsm"
    JSX_FLOW = "mdxJsxFlowElement"
    JSX_TEXT = "mdxJsxTextElement"
    OTHER = "other"

    @classmethod
    def of(cls, type_name: Any) -> NodeKind:
        for kind in cls:
            if kind is not cls.OTHER and kind.value == type_name:
                return kind
        return cls.OTHER


def _extra(d: Mapping[str, Any], known: tuple[str, ...]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if k not in known}


# --------------------------- attributes ---------------------------

@dataclass
class JsxAttribute:
    name: Optional[str]
    value: Any = None
    type: str = "mdxJsxAttribute"
    extra: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> JsxAttribute:
        return JsxAttribute(
            name=d.get("name"),
            value=d.get("value"),
            type=str(d.get("type", "mdxJsxAttribute")),
            extra=_extra(d, ("type", "name", "value")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.name is not None:
            out["name"] = self.name
        out["value"] = self.value
        out.update(self.extra)
        return out


# --------------------------- nodes ---------------------------

@dataclass
class GenericNode:
    """Any node the transform does not interpret. Kept verbatim."""
    raw: Dict[str, Any]

    kind: ClassVar[NodeKind] = NodeKind.OTHER

    @property
    def type(self) -> str:
        return str(self.raw.get("type", ""))

    @property
    def name(self) -> Optional[str]:
        name = self.raw.get("name")
        return name if isinstance(name, str) else None

    def to_dict(self) -> Dict[str, Any]:
        return self.raw


@dataclass
class EsmNode:
    """
    ESM block (`import ... from "..."`) embedded in the document.

    `data` holds whatever metadata the MDX parser attached; when present,
    `data["estree"]` is the parsed ESTree `Program` of `value`.
    """
    value: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[NodeKind] = NodeKind.ESM

    @property
    def estree(self) -> Optional[Mapping[str, Any]]:
        program = self.data.get("estree")
        return program if isinstance(program, Mapping) else None

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> EsmNode:
        value = d.get("value")
        data = d.get("data")
        return EsmNode(
            value=value if isinstance(value, str) else "",
            data=dict(data) if isinstance(data, Mapping) else {},
            extra=_extra(d, ("type", "value", "data")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": NodeKind.ESM.value, "value": self.value}
        if self.data:
            out["data"] = self.data
        out.update(self.extra)
        return out


@dataclass
class JsxElement:
    """Component element (`<Name attr="...">children</Name>`)."""
    name: Optional[str]
    attributes: List[JsxAttribute] = field(default_factory=list)
    children: List[Node] = field(default_factory=list)
    flow: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.JSX_FLOW if self.flow else NodeKind.JSX_TEXT

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> JsxElement:
        name = d.get("name")
        return JsxElement(
            name=name if isinstance(name, str) else None,
            attributes=[JsxAttribute.from_dict(a) for a in d.get("attributes") or []],
            children=[node_from_dict(c) for c in d.get("children") or []],
            flow=NodeKind.of(d.get("type")) is NodeKind.JSX_FLOW,
            extra=_extra(d, ("type", "name", "attributes", "children")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.kind.value,
            "name": self.name,
            "attributes": [a.to_dict() for a in self.attributes],
            "children": [c.to_dict() for c in self.children],
        }
        out.update(self.extra)
        return out


Node = Union[EsmNode, JsxElement, GenericNode]


@dataclass
class Root:
    children: List[Node] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[NodeKind] = NodeKind.ROOT

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> Root:
        if not isinstance(d, Mapping):
            raise TypeError("Document tree must be a mapping")
        if d.get("type") != NodeKind.ROOT.value:
            raise ValueError(f"Document tree must have type 'root', got: {d.get('type')!r}")
        return Root(
            children=[node_from_dict(c) for c in d.get("children") or []],
            extra=_extra(d, ("type", "children")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": NodeKind.ROOT.value,
            "children": [c.to_dict() for c in self.children],
        }
        out.update(self.extra)
        return out


def node_from_dict(d: Mapping[str, Any]) -> Node:
    kind = NodeKind.of(d.get("type"))
    if kind is NodeKind.ESM:
        return EsmNode.from_dict(d)
    if kind in (NodeKind.JSX_FLOW, NodeKind.JSX_TEXT):
        return JsxElement.from_dict(d)
    return GenericNode(raw=dict(d))


__all__ = [
    "NodeKind",
    "JsxAttribute",
    "GenericNode",
    "EsmNode",
    "JsxElement",
    "Node",
    "Root",
    "node_from_dict",
]
