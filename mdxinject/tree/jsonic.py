"""
Reading and writing document trees as mdast JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from .model import Root


def load_tree(source: Union[str, Path, Dict[str, Any]]) -> Root:
    """
    Build a Root from a mapping, a JSON string or a path to a JSON file.
    """
    if isinstance(source, dict):
        return Root.from_dict(source)
    if isinstance(source, Path):
        return Root.from_dict(json.loads(source.read_text(encoding="utf-8")))
    return Root.from_dict(json.loads(source))


def dump_tree(tree: Root, *, indent: int | None = 2) -> str:
    return json.dumps(tree.to_dict(), ensure_ascii=False, indent=indent) + "\n"


__all__ = ["load_tree", "dump_tree"]
