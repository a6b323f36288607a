from .load import CONFIG_FILE, find_config, load_options
from .model import (
    DEFAULT_EXTENSIONS,
    DEFAULT_PROP_NAME,
    FormatterCfg,
    TransformOptions,
    compile_pattern,
)

__all__ = [
    "CONFIG_FILE",
    "find_config",
    "load_options",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_PROP_NAME",
    "FormatterCfg",
    "TransformOptions",
    "compile_pattern",
]
