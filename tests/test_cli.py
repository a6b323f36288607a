import json
import textwrap
from pathlib import Path

import pytest

from mdxinject import cli
from mdxinject.transform import CodeInjector

from tests.infrastructure.file_utils import write
from tests.infrastructure.testing_utils import FakeFormatter

TREE = {
    "type": "root",
    "children": [
        {
            "type": "mdxjsEsm",
            "value": "import Foo from './foo'",
            "data": {
                "estree": {
                    "type": "Program",
                    "body": [
                        {
                            "type": "ImportDeclaration",
                            "specifiers": [{"type": "ImportDefaultSpecifier", "local": {"name": "Foo"}}],
                            "source": {"type": "Literal", "value": "./foo"},
                        }
                    ],
                }
            },
        },
        {
            "type": "mdxJsxFlowElement",
            "name": "Target",
            "attributes": [],
            "children": [{"type": "mdxJsxFlowElement", "name": "Foo", "attributes": [], "children": []}],
            "position": {"start": {"line": 3, "column": 1}},
        },
    ],
    "position": {"start": {"line": 1, "column": 1}},
}


@pytest.fixture(autouse=True)
def _stub_formatter(monkeypatch):
    fmt = FakeFormatter({"let x=1": "let x = 1;\n"})
    original = CodeInjector.__init__

    def init(self, options, *, resolver=None, formatter=None):
        original(self, options, resolver=resolver, formatter=formatter or fmt)

    monkeypatch.setattr(CodeInjector, "__init__", init)
    return fmt


def test_inject_writes_tree(docs: Path, tmp_path: Path, capsys):
    tree_file = write(tmp_path / "tree.json", json.dumps(TREE))

    rc = cli.main(["inject", str(tree_file), "--component", "Target", "--doc", str(docs / "page.mdx")])

    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    target = out["children"][1]
    assert target["attributes"] == [{"type": "mdxJsxAttribute", "name": "code", "value": "let x = 1;\n"}]
    assert target["position"] == {"start": {"line": 3, "column": 1}}
    assert out["position"] == TREE["position"]
    assert out["children"][0] == TREE["children"][0]


def test_inject_report_to_file(docs: Path, tmp_path: Path):
    tree_file = write(tmp_path / "tree.json", json.dumps(TREE))
    out_file = tmp_path / "report.json"

    rc = cli.main([
        "inject", str(tree_file), "--pattern", "^Tar", "--prop", "source",
        "--doc", str(docs / "page.mdx"), "--report", "-o", str(out_file),
    ])

    assert rc == 0
    report = json.loads(out_file.read_text(encoding="utf-8"))
    assert report["prop_name"] == "source"
    assert report["records"][0]["state"] == "injected"
    assert report["records"][0]["resolved_path"] == str(docs / "foo.ts")


def test_inject_uses_config_file(docs: Path, tmp_path: Path, capsys):
    write(
        docs / "mdxinject.yaml",
        textwrap.dedent("""
        component_to_inject: Target
        prop_name: snippet
        """).lstrip(),
    )
    tree_file = write(tmp_path / "tree.json", json.dumps(TREE))

    rc = cli.main(["inject", str(tree_file), "--doc", str(docs / "page.mdx")])

    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["children"][1]["attributes"][0]["name"] == "snippet"


def test_missing_target_is_a_user_error(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    tree_file = write(tmp_path / "tree.json", json.dumps(TREE))

    rc = cli.main(["inject", str(tree_file)])

    assert rc == 2
    assert "component_to_inject" in capsys.readouterr().err


def test_missing_module_is_a_user_error(tmp_path: Path, capsys):
    tree_file = write(tmp_path / "tree.json", json.dumps(TREE))

    rc = cli.main(["inject", str(tree_file), "--component", "Target", "--doc", str(tmp_path / "page.mdx")])

    assert rc == 2
    assert "Cannot find module './foo'" in capsys.readouterr().err


def test_invalid_tree(tmp_path: Path, capsys):
    tree_file = write(tmp_path / "tree.json", "{not json")
    rc = cli.main(["inject", str(tree_file), "--component", "Target"])
    assert rc == 2
    assert "Invalid document tree" in capsys.readouterr().err


def test_resolve_command(docs: Path, capsys):
    write(docs / "foo.js", "let y=2")
    rc = cli.main(["resolve", "./foo", "--doc", str(docs / "page.mdx"), "--ext", ".js", "--ext", ".ts"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == str(docs / "foo.js")
