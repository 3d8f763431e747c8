"""tagdebug — tag-gated debug output.

Register boolean debug tags, query them, write diagnostics only for the
active ones, and subscribe to tag changes.
"""

from tagdebug._version import __version__, __app_name__
from tagdebug.errors import (
    TagDebugError, InvalidOptionType, InvalidSelectorType,
    InvalidExtensionType, InvalidConfigShape,
)
from tagdebug.extensions import Extension, ExtensionKind, classify_extension
from tagdebug.options import DEFAULT_OPTIONS, OptionSpec
from tagdebug.registry import TagRegistry

__all__ = [
    "__version__", "__app_name__",
    "TagRegistry",
    "OptionSpec", "DEFAULT_OPTIONS",
    "Extension", "ExtensionKind", "classify_extension",
    "TagDebugError", "InvalidOptionType", "InvalidSelectorType",
    "InvalidExtensionType", "InvalidConfigShape",
]
