"""
User-supplied resolvers.
"""

from __future__ import annotations

import importlib
import os
from pathlib import Path
from typing import Any, Callable, Optional

from ..errors import ConfigError, ModuleResolutionError
from .base import ModuleResolver, ResolveContext


class CallableModuleResolver(ModuleResolver):
    """
    Wraps a function `func(specifier, options) -> path | None`.

    The function replaces resolution entirely. A falsy return leaves the
    component untouched; relative paths are taken against the document's
    directory when it is known.
    """

    def __init__(self, func: Callable[..., Any]):
        if not callable(func):
            raise ConfigError("module_resolver must be callable")
        self.func = func

    def resolve(self, specifier: str, context: ResolveContext) -> Optional[Path]:
        result = self.func(specifier, context.options)
        if not result:
            return None
        if not isinstance(result, (str, os.PathLike)):
            raise ModuleResolutionError(
                specifier,
                f"Custom module resolver returned {type(result).__name__} for '{specifier}', expected a path",
            )
        path = Path(result)
        if not path.is_absolute() and context.base_dir is not None:
            path = context.base_dir / path
        return path


def load_resolver_ref(ref: str) -> Callable[..., Any]:
    """
    Import a resolver function from a "package.module:attr" reference.
    """
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Invalid module_resolver reference {ref!r}: expected 'module:attr'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import module_resolver module '{module_name}': {e}") from e

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ConfigError(f"module_resolver '{ref}' not found: {e}") from e
    if not callable(obj):
        raise ConfigError(f"module_resolver '{ref}' is not callable")
    return obj


__all__ = ["CallableModuleResolver", "load_resolver_ref"]
