"""
Module resolver contract.

A resolver turns the raw import path of a component reference into the
file whose content is injected. Every resolver returns a path; reading and
formatting happen in later stages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config.model import TransformOptions
from ..errors import ModuleResolutionError


@dataclass(frozen=True)
class ResolveContext:
    options: TransformOptions
    # path of the document being transformed, if known
    document_path: Optional[Path] = None

    @property
    def base_dir(self) -> Optional[Path]:
        """Directory relative imports are resolved against."""
        if self.document_path is None:
            return None
        return self.document_path.parent


class ModuleResolver(ABC):

    @abstractmethod
    def resolve(self, specifier: str, context: ResolveContext) -> Optional[Path]:
        """
        Resolve an import specifier to a file.

        Args:
            specifier: Raw module path from the import statement ("./foo")
            context: Transform options and the current document path

        Returns:
            Path of the file to inject, or None when the reference is
            deliberately left unresolved

        Raises:
            ModuleResolutionError: If the reference points at nothing usable
        """
        pass


def read_module(path: Path, specifier: str) -> str:
    """Read a resolved module as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModuleResolutionError(
            specifier,
            f"Cannot read module '{specifier}' at {path}: {e}",
            candidates=[str(path)],
        ) from e


__all__ = ["ResolveContext", "ModuleResolver", "read_module"]
