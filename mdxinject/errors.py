"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from InjectUserError.

Programming errors and bugs should NOT inherit from InjectUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class InjectUserError(Exception):
    """
    Base class for all user-facing errors in mdxinject.

    These errors indicate problems that the user can fix:
    configuration issues, broken import references, unformattable sources.
    """
    pass


class ConfigError(InjectUserError, ValueError):
    """Invalid or missing transform configuration."""
    pass


class ModuleResolutionError(InjectUserError):
    """
    An import referenced by a component could not be turned into a readable file.
    """

    def __init__(self, specifier: str, message: str, candidates: Optional[Sequence[str]] = None):
        self.specifier = specifier
        self.candidates: List[str] = list(candidates or [])
        super().__init__(message)


class FormatError(InjectUserError):
    """The code formatter rejected the source or could not be run."""

    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        super().__init__(message)


__all__ = ["InjectUserError", "ConfigError", "ModuleResolutionError", "FormatError"]
