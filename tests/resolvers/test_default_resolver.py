from pathlib import Path

import pytest

from mdxinject.config.model import TransformOptions
from mdxinject.errors import ModuleResolutionError
from mdxinject.resolvers import DefaultModuleResolver, ResolveContext, is_relative_specifier

from tests.infrastructure.file_utils import write


def ctx(doc: Path | None, **kwargs) -> ResolveContext:
    kwargs.setdefault("component_to_inject", "Target")
    return ResolveContext(options=TransformOptions(**kwargs), document_path=doc)


def test_first_declared_extension_wins(tmp_path: Path):
    write(tmp_path / "foo.ts", "ts")
    write(tmp_path / "foo.js", "js")
    doc = tmp_path / "page.mdx"

    found = DefaultModuleResolver().resolve("./foo", ctx(doc, extensions=[".ts", ".js"]))
    assert found == tmp_path / "foo.ts"

    found = DefaultModuleResolver().resolve("./foo", ctx(doc, extensions=[".js", ".ts"]))
    assert found == tmp_path / "foo.js"


def test_resolver_extensions_override_options(tmp_path: Path):
    write(tmp_path / "foo.ts", "ts")
    write(tmp_path / "foo.js", "js")
    found = DefaultModuleResolver([".js"]).resolve("./foo", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "foo.js"


def test_relative_to_document_directory(tmp_path: Path):
    write(tmp_path / "src" / "widget.tsx", "x")
    doc = tmp_path / "docs" / "guide" / "page.mdx"
    found = DefaultModuleResolver().resolve("../../src/widget", ctx(doc))
    assert found == tmp_path / "src" / "widget.tsx"


def test_explicit_extension_is_not_probed(tmp_path: Path):
    write(tmp_path / "foo.js", "js")
    write(tmp_path / "foo.js.ts", "never")
    found = DefaultModuleResolver().resolve("./foo.js", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "foo.js"


def test_existing_file_with_undeclared_extension_is_taken_as_is(tmp_path: Path):
    write(tmp_path / "Demo.vue", "<template />")
    write(tmp_path / "Demo.vue.tsx", "never")
    found = DefaultModuleResolver().resolve("./Demo.vue", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "Demo.vue"


def test_dotted_name_without_file_is_still_probed(tmp_path: Path):
    write(tmp_path / "button.styles.ts", "x")
    found = DefaultModuleResolver().resolve("./button.styles", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "button.styles.ts"


def test_explicit_extension_missing_file_fails(tmp_path: Path):
    with pytest.raises(ModuleResolutionError) as ei:
        DefaultModuleResolver().resolve("./missing.js", ctx(tmp_path / "page.mdx"))
    assert ei.value.candidates == [str(tmp_path / "missing.js")]


def test_directory_index(tmp_path: Path):
    write(tmp_path / "button" / "index.jsx", "x")
    found = DefaultModuleResolver().resolve("./button", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "button" / "index.jsx"


def test_directory_package_main(tmp_path: Path):
    write(tmp_path / "lib" / "package.json", '{"main": "dist/entry"}')
    write(tmp_path / "lib" / "dist" / "entry.js", "x")
    write(tmp_path / "lib" / "index.js", "not me")
    found = DefaultModuleResolver().resolve("./lib", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "lib" / "dist" / "entry.js"


def test_bare_specifier_from_node_modules(tmp_path: Path):
    write(tmp_path / "node_modules" / "ui-kit" / "index.js", "x")
    doc = tmp_path / "docs" / "page.mdx"
    found = DefaultModuleResolver().resolve("ui-kit", ctx(doc))
    assert found.resolve() == (tmp_path / "node_modules" / "ui-kit" / "index.js").resolve()


def test_not_found_lists_candidates(tmp_path: Path):
    with pytest.raises(ModuleResolutionError) as ei:
        DefaultModuleResolver().resolve("./foo", ctx(tmp_path / "page.mdx", extensions=[".ts", ".js"]))
    err = ei.value
    assert err.specifier == "./foo"
    assert err.candidates == [str(tmp_path / "foo.ts"), str(tmp_path / "foo.js")]
    assert "Cannot find module './foo'" in str(err)


def test_unknown_document_path_fails():
    with pytest.raises(ModuleResolutionError, match="document path is unknown"):
        DefaultModuleResolver().resolve("./foo", ctx(None))


@pytest.mark.parametrize(
    "spec, expected",
    [("./a", True), ("../a", True), ("/abs/a", True), (".", True), ("react", False), ("@scope/pkg", False)],
)
def test_is_relative_specifier(spec, expected):
    assert is_relative_specifier(spec) is expected
