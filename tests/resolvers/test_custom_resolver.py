from pathlib import Path

import pytest

from mdxinject.config.model import TransformOptions
from mdxinject.errors import ConfigError, ModuleResolutionError
from mdxinject.resolvers import CallableModuleResolver, ResolveContext, load_resolver_ref
from mdxinject.resolvers.base import read_module

from tests.infrastructure.file_utils import write


def ctx(doc: Path | None) -> ResolveContext:
    return ResolveContext(options=TransformOptions(component_to_inject="Target"), document_path=doc)


def test_receives_specifier_and_options(tmp_path: Path):
    seen = []

    def resolver(specifier, options):
        seen.append((specifier, options.prop_name))
        return str(tmp_path / "x.js")

    found = CallableModuleResolver(resolver).resolve("@/x", ctx(None))
    assert found == tmp_path / "x.js"
    assert seen == [("@/x", "code")]


def test_falsy_result_means_unresolved():
    assert CallableModuleResolver(lambda s, o: None).resolve("./x", ctx(None)) is None
    assert CallableModuleResolver(lambda s, o: "").resolve("./x", ctx(None)) is None


def test_relative_result_is_anchored_at_document(tmp_path: Path):
    found = CallableModuleResolver(lambda s, o: "examples/x.js").resolve("x", ctx(tmp_path / "page.mdx"))
    assert found == tmp_path / "examples" / "x.js"


def test_non_path_result_is_an_error():
    with pytest.raises(ModuleResolutionError, match="expected a path"):
        CallableModuleResolver(lambda s, o: 42).resolve("./x", ctx(None))


def test_not_callable():
    with pytest.raises(ConfigError):
        CallableModuleResolver("nope")  # type: ignore[arg-type]


def test_load_resolver_ref():
    fn = load_resolver_ref("os.path:basename")
    assert fn("/a/b.js") == "b.js"


@pytest.mark.parametrize("ref", ["os.path", ":basename", "no_such_module_xyz:fn", "os.path:no_such_attr", "os:sep"])
def test_load_resolver_ref_errors(ref):
    with pytest.raises(ConfigError):
        load_resolver_ref(ref)


def test_read_module(tmp_path: Path):
    p = write(tmp_path / "a.js", "const a = 1\n")
    assert read_module(p, "./a") == "const a = 1\n"


def test_read_module_missing(tmp_path: Path):
    with pytest.raises(ModuleResolutionError) as ei:
        read_module(tmp_path / "gone.js", "./gone")
    assert ei.value.specifier == "./gone"
