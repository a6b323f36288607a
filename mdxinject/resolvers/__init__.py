from .base import ModuleResolver, ResolveContext, read_module
from .custom import CallableModuleResolver, load_resolver_ref
from .default import DefaultModuleResolver, is_relative_specifier

__all__ = [
    "ModuleResolver",
    "ResolveContext",
    "read_module",
    "CallableModuleResolver",
    "load_resolver_ref",
    "DefaultModuleResolver",
    "is_relative_specifier",
]
