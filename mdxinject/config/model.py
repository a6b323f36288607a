from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Pattern, Tuple, Union

from ..errors import ConfigError

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".tsx", ".js", ".json", ".ts", ".jsx", ".mdx")
DEFAULT_PROP_NAME = "code"

ModuleResolverFn = Callable[..., Any]

_REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def compile_pattern(pattern: str, flags: Optional[str] = None) -> Pattern[str]:
    """Compile a component pattern; `flags` is a string such as "i" or "ms"."""
    value = 0
    for ch in flags or "":
        if ch not in _REGEX_FLAGS:
            raise ConfigError(f"Unsupported regex flag {ch!r} (allowed: {''.join(_REGEX_FLAGS)})")
        value |= _REGEX_FLAGS[ch]
    try:
        return re.compile(pattern, value)
    except re.error as e:
        raise ConfigError(f"Invalid component pattern {pattern!r}: {e}") from e


def _parse_component(raw: Any) -> Union[str, Pattern[str], None]:
    if raw is None or isinstance(raw, (str, re.Pattern)):
        return raw
    if isinstance(raw, dict):
        _assert_only_keys(raw, ["pattern", "flags"], ctx="component_to_inject")
        pattern = raw.get("pattern")
        if not isinstance(pattern, str) or not pattern:
            raise ConfigError("component_to_inject.pattern must be a non-empty string")
        flags = raw.get("flags")
        if flags is not None and not isinstance(flags, str):
            raise ConfigError("component_to_inject.flags must be a string if provided")
        return compile_pattern(pattern, flags)
    raise ConfigError("component_to_inject must be a string or a mapping with 'pattern'")


@dataclass(frozen=True)
class FormatterCfg:
    """
    Settings passed to the external formatter.

    The values are always passed explicitly so output does not depend on
    formatter defaults or on config files lying around the project.
    """
    command: Tuple[str, ...] = ("prettier",)
    tab_width: int = 4
    semi: bool = True
    parser: str = "babel"
    # pick the parser from the resolved file extension (.ts → typescript, ...)
    infer_parser: bool = True
    timeout: float = 30.0

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> FormatterCfg:
        if not d:
            return FormatterCfg()
        _assert_only_keys(d, ["command", "tab_width", "semi", "parser", "infer_parser", "timeout"], ctx="formatter")
        command = d.get("command", ["prettier"])
        if isinstance(command, str):
            command = command.split()
        if not isinstance(command, (list, tuple)) or not command or not all(isinstance(x, str) for x in command):
            raise ConfigError("formatter.command must be a non-empty list of strings")
        parser = d.get("parser", "babel")
        if not isinstance(parser, str) or not parser:
            raise ConfigError("formatter.parser must be a non-empty string")
        return FormatterCfg(
            command=tuple(command),
            tab_width=int(d.get("tab_width", 4)),
            semi=bool(d.get("semi", True)),
            parser=parser,
            infer_parser=bool(d.get("infer_parser", True)),
            timeout=float(d.get("timeout", 30.0)),
        )


@dataclass(frozen=True)
class TransformOptions:
    """
    Injector configuration, resolved once and shared by every document.
    """
    component_to_inject: Union[str, Pattern[str], None] = None
    prop_name: str = DEFAULT_PROP_NAME
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    # document path used when the caller does not pass one per call
    file_path: Optional[Path] = None
    module_resolver: Optional[ModuleResolverFn] = None
    formatter: FormatterCfg = field(default_factory=FormatterCfg)

    def __post_init__(self) -> None:
        target = self.component_to_inject
        if isinstance(target, str):
            if not target:
                raise ConfigError("'component_to_inject' needs to be defined")
        elif not isinstance(target, re.Pattern):
            raise ConfigError("'component_to_inject' needs to be defined")

        if not isinstance(self.prop_name, str) or not self.prop_name:
            raise ConfigError("prop_name must be a non-empty string")

        exts = tuple(self.extensions)
        for ext in exts:
            if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
                raise ConfigError(f"Invalid extension {ext!r}: expected a suffix like '.ts'")
        object.__setattr__(self, "extensions", exts)

        if self.file_path is not None and not isinstance(self.file_path, Path):
            object.__setattr__(self, "file_path", Path(self.file_path))

        if self.module_resolver is not None and not callable(self.module_resolver):
            raise ConfigError("module_resolver must be callable")

    def with_overrides(self, **changes: Any) -> TransformOptions:
        return replace(self, **changes)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]], *, base_dir: Optional[Path] = None) -> TransformOptions:
        """
        Build options from a config mapping (usually parsed YAML).

        Relative `file_path` values are anchored at `base_dir`;
        `module_resolver` is a "package.module:attr" reference.
        """
        if not d:
            raise ConfigError("'component_to_inject' needs to be defined")
        _assert_only_keys(
            d,
            ["component_to_inject", "prop_name", "extensions", "file_path", "module_resolver", "formatter"],
            ctx="TransformOptions",
        )
        kwargs: Dict[str, Any] = {"component_to_inject": _parse_component(d.get("component_to_inject"))}

        if "prop_name" in d:
            kwargs["prop_name"] = d["prop_name"]

        exts = d.get("extensions")
        if exts is not None:
            if not isinstance(exts, (list, tuple)):
                raise ConfigError("extensions must be a list of strings")
            kwargs["extensions"] = tuple(exts)

        fp = d.get("file_path")
        if fp is not None:
            if not isinstance(fp, str):
                raise ConfigError("file_path must be a string")
            path = Path(fp)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            kwargs["file_path"] = path

        ref = d.get("module_resolver")
        if isinstance(ref, str):
            from ..resolvers.custom import load_resolver_ref
            kwargs["module_resolver"] = load_resolver_ref(ref)
        elif callable(ref):
            kwargs["module_resolver"] = ref
        elif ref is not None:
            raise ConfigError("module_resolver must be a 'module:attr' string or a callable")

        kwargs["formatter"] = FormatterCfg.from_dict(d.get("formatter"))
        return TransformOptions(**kwargs)


__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_PROP_NAME",
    "FormatterCfg",
    "ModuleResolverFn",
    "TransformOptions",
    "compile_pattern",
]
