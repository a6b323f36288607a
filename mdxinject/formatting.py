"""
Code formatting through an external prettier process.

The injected text is shown verbatim to readers, so the formatter is always
called with an explicit, fixed option set.
"""

from __future__ import annotations

import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from .config.model import FormatterCfg
from .errors import FormatError

PARSERS_BY_EXT: Dict[str, str] = {
    ".js": "babel",
    ".jsx": "babel",
    ".mjs": "babel",
    ".cjs": "babel",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".json": "json",
    ".md": "markdown",
    ".mdx": "mdx",
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
    ".html": "html",
    ".vue": "vue",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".graphql": "graphql",
}


def parser_for_path(path: Optional[Path], default: str = "babel") -> str:
    """Prettier parser name for a file, falling back to `default`."""
    if path is None:
        return default
    return PARSERS_BY_EXT.get(path.suffix.lower(), default)


class CodeFormatter(ABC):

    @abstractmethod
    def format(self, code: str, parser: Optional[str] = None) -> str:
        """
        Return canonically formatted `code`.

        Raises:
            FormatError: If the source cannot be formatted
        """
        pass


class PrettierFormatter(CodeFormatter):
    """Runs the prettier CLI, feeding the source through stdin."""

    def __init__(self, cfg: Optional[FormatterCfg] = None):
        self.cfg = cfg or FormatterCfg()

    def build_command(self, parser: str) -> List[str]:
        cmd = [
            *self.cfg.command,
            "--parser", parser,
            "--tab-width", str(self.cfg.tab_width),
            "--no-config",
            "--no-editorconfig",
        ]
        if not self.cfg.semi:
            cmd.append("--no-semi")
        return cmd

    def format(self, code: str, parser: Optional[str] = None) -> str:
        parser = parser or self.cfg.parser
        cmd = self.build_command(parser)

        exe = shutil.which(cmd[0])
        if exe is None:
            raise FormatError(f"Formatter executable not found: {cmd[0]}")

        try:
            proc = subprocess.run(
                [exe, *cmd[1:]],
                input=code,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.cfg.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise FormatError(f"Formatter timed out after {self.cfg.timeout}s") from e
        except OSError as e:
            raise FormatError(f"Cannot run formatter {cmd[0]}: {e}") from e

        if proc.returncode != 0:
            stderr = proc.stderr or ""
            first = stderr.strip().splitlines()[0] if stderr.strip() else f"exit code {proc.returncode}"
            raise FormatError(f"Formatting failed (parser={parser}): {first}", stderr=stderr)
        return proc.stdout


__all__ = ["PARSERS_BY_EXT", "parser_for_path", "CodeFormatter", "PrettierFormatter"]
