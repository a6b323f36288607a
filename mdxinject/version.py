from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Single place to read the installed package version.
    Does not depend on the rest of the package (avoids import cycles).
    """
    for dist in ("mdx-code-inject", "mdxinject"):
        try:
            return metadata.version(dist)
        except metadata.PackageNotFoundError:
            continue
    return "0.0.0"

__all__ = ["tool_version"]
