from __future__ import annotations

from .tree.model import JsxAttribute, JsxElement


def set_attribute(node: JsxElement, name: str, value: str) -> JsxAttribute:
    """
    Append an attribute to the element.

    Existing attributes are left alone, so injecting the same prop twice
    yields two entries; renderers take the last one.
    """
    attr = JsxAttribute(name=name, value=value)
    node.attributes.append(attr)
    return attr


__all__ = ["set_attribute"]
