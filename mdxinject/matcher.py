from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from .tree.model import JsxElement

ComponentTarget = Union[str, Pattern[str]]


def component_matches(node_name: Optional[str], target: ComponentTarget | None) -> bool:
    """
    Whether a component name is selected for injection.

    Strings compare exactly; compiled patterns match anywhere in the name.
    """
    if node_name is None:
        return False
    if isinstance(target, str):
        return target == node_name
    if isinstance(target, re.Pattern):
        return target.search(node_name) is not None
    return False


def first_child_name(node: JsxElement) -> Optional[str]:
    """Name referenced by the element's first child (`<Target><Foo/></Target>` → "Foo")."""
    if not node.children:
        return None
    name = getattr(node.children[0], "name", None)
    return name if isinstance(name, str) and name else None


__all__ = ["ComponentTarget", "component_matches", "first_child_name"]
