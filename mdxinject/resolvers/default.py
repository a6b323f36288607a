"""
Built-in resolver: extension probing relative to the document.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import ModuleResolutionError
from .base import ModuleResolver, ResolveContext

logger = logging.getLogger(__name__)


def _is_readable_file(p: Path) -> bool:
    return p.is_file() and os.access(p, os.R_OK)


def is_relative_specifier(specifier: str) -> bool:
    return (
        specifier in (".", "..")
        or specifier.startswith(("./", "../", "/"))
        or Path(specifier).is_absolute()
    )


class DefaultModuleResolver(ModuleResolver):
    """
    Finds the file an import refers to.

    Rules, in order:
      • a specifier with an extension is taken as-is when the file exists,
        and fails without probing when that extension is a declared one;
      • otherwise each extension is appended in declared order, first hit wins;
      • a directory resolves through package.json "main", then index<ext>;
      • bare specifiers are looked up in node_modules up the directory tree.

    Not finding anything is an error: the import exists, so the author
    expects the file to be there.
    """

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions = tuple(extensions) if extensions is not None else None

    def resolve(self, specifier: str, context: ResolveContext) -> Optional[Path]:
        base_dir = context.base_dir
        if base_dir is None:
            raise ModuleResolutionError(
                specifier,
                f"Cannot resolve '{specifier}': document path is unknown (set file_path)",
            )
        exts = self.extensions if self.extensions is not None else context.options.extensions

        tried: List[Path] = []
        if is_relative_specifier(specifier):
            found = self._resolve_path(Path(os.path.normpath(base_dir / specifier)), exts, tried)
        else:
            found = self._resolve_package(specifier, base_dir, exts, tried)

        if found is None:
            raise ModuleResolutionError(
                specifier,
                f"Cannot find module '{specifier}' from {base_dir} "
                f"(tried: {', '.join(str(p) for p in tried) or 'nothing'})",
                candidates=[str(p) for p in tried],
            )
        logger.debug("Resolved '%s' → %s", specifier, found)
        return found

    def _resolve_path(
        self,
        target: Path,
        exts: Sequence[str],
        tried: List[Path],
        *,
        follow_main: bool = True,
    ) -> Optional[Path]:
        if target.suffix:
            tried.append(target)
            if _is_readable_file(target):
                return target
        if target.suffix in exts:
            # declared extension but no such file: nothing to probe
            return None

        for ext in exts:
            candidate = target.with_name(target.name + ext)
            tried.append(candidate)
            if _is_readable_file(candidate):
                return candidate

        if not target.is_dir():
            return None

        if follow_main:
            main = _package_main(target)
            if main:
                found = self._resolve_path(target / main, exts, tried, follow_main=False)
                if found is not None:
                    return found

        for ext in exts:
            candidate = target / f"index{ext}"
            tried.append(candidate)
            if _is_readable_file(candidate):
                return candidate
        return None

    def _resolve_package(
        self,
        specifier: str,
        base_dir: Path,
        exts: Sequence[str],
        tried: List[Path],
    ) -> Optional[Path]:
        start = base_dir.resolve()
        for d in (start, *start.parents):
            modules = d / "node_modules"
            if not modules.is_dir():
                continue
            found = self._resolve_path(modules / specifier, exts, tried)
            if found is not None:
                return found
        return None


def _package_main(pkg_dir: Path) -> Optional[str]:
    manifest = pkg_dir / "package.json"
    if not manifest.is_file():
        return None
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.debug("Unreadable package.json ignored: %s", manifest)
        return None
    main = data.get("main") if isinstance(data, dict) else None
    return main if isinstance(main, str) and main else None


__all__ = ["DefaultModuleResolver", "is_relative_specifier"]
