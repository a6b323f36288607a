from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportSpecifier:
    """A locally bound name and the raw module path it was imported from."""
    local: str
    source: str


__all__ = ["ImportSpecifier"]
