"""
mdxinject: inject the source of imported modules into MDX component props.
"""

from .config import FormatterCfg, TransformOptions, load_options
from .errors import ConfigError, FormatError, InjectUserError, ModuleResolutionError
from .formatting import CodeFormatter, PrettierFormatter
from .report import InjectionRecord, InjectionReport
from .resolvers import CallableModuleResolver, DefaultModuleResolver, ModuleResolver, ResolveContext
from .transform import CodeInjector, transform
from .tree import Root, dump_tree, load_tree

__all__ = [
    "FormatterCfg",
    "TransformOptions",
    "load_options",
    "ConfigError",
    "FormatError",
    "InjectUserError",
    "ModuleResolutionError",
    "CodeFormatter",
    "PrettierFormatter",
    "InjectionRecord",
    "InjectionReport",
    "CallableModuleResolver",
    "DefaultModuleResolver",
    "ModuleResolver",
    "ResolveContext",
    "CodeInjector",
    "transform",
    "Root",
    "dump_tree",
    "load_tree",
]
