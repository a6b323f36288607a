"""
Loading transform options from a YAML config file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from .model import TransformOptions

CONFIG_FILE = "mdxinject.yaml"

_yaml = YAML(typ="safe")


def read_yaml_map(path: Path) -> Dict[str, Any]:
    """Reads a YAML file and returns its top-level mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def find_config(start: Path) -> Optional[Path]:
    """
    Look for `mdxinject.yaml` in `start` and its parents.
    """
    cur = start.resolve()
    if cur.is_file():
        cur = cur.parent
    for d in (cur, *cur.parents):
        candidate = d / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_options(path: Path, **overrides: Any) -> TransformOptions:
    """
    Read options from `path`; keyword overrides replace file values.

    Relative paths inside the file are resolved against the file's directory.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    raw = read_yaml_map(path)
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return TransformOptions.from_dict(raw, base_dir=path.parent)


__all__ = ["CONFIG_FILE", "find_config", "load_options", "read_yaml_map"]
