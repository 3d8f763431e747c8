"""Exception types raised by tagdebug.

All of them are API-misuse errors: they are raised synchronously to the
caller and never retried. Each also subclasses ``TypeError``.
"""

from typing import Any


class TagDebugError(Exception):
    """Base for tagdebug errors."""


class InvalidOptionType(TagDebugError, TypeError):
    def __init__(self, option: str, value: Any):
        super().__init__(f"Invalid value for {option} option: {value!r}")
        self.option = option
        self.value = value


class InvalidSelectorType(TagDebugError, TypeError):
    def __init__(self, selector: Any):
        super().__init__(
            f"Unsupported tag type {type(selector).__name__}: {selector!r}")
        self.selector = selector


class InvalidExtensionType(TagDebugError, TypeError):
    def __init__(self, extension: Any):
        super().__init__(
            f"Unsupported extension type {type(extension).__name__}: {extension!r}")
        self.extension = extension


class InvalidConfigShape(TagDebugError, TypeError):
    def __init__(self, what: str, value: Any, detail: str = None):
        if detail is None:
            detail = f"must be a mapping, got {type(value).__name__}"
        super().__init__(f"{what} {detail}: {value!r}")
        self.what = what
        self.value = value
