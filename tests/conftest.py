from __future__ import annotations

from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write
from tests.infrastructure.testing_utils import FakeFormatter


@pytest.fixture
def fake_formatter() -> FakeFormatter:
    return FakeFormatter({"let x=1": "let x = 1;\n"})


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    """
    Minimal docs tree:
        docs/page.mdx
        docs/foo.ts       (let x=1)
        docs/bar.js
    """
    base = tmp_path / "docs"
    write(base / "page.mdx", "import Foo from './foo'\n\n<Target><Foo /></Target>\n")
    write(base / "foo.ts", "let x=1")
    write(base / "bar.js", "export const bar = 2\n")
    return base
