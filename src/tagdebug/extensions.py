"""Extension loading.

An extension is plugin code that augments a registry: it may add
attributes or options, or subscribe to registry events. No base class is
required; the shape of the value decides how it is applied:

    list / tuple                     each element, in order
    obj.register_debug(registry, o)  REGISTRAR
    obj.extend_debug(o)              EXTENDER, called with the registry
                                     as its receiver
    callable(registry, o)            CALLABLE, same calling convention as
                                     EXTENDER

The shape is decided once by ``classify_extension()``; ``load_extension()``
then dispatches on the result.
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from tagdebug.errors import InvalidExtensionType
from tagdebug.lib.log_lib import get_output


class ExtensionKind(Enum):
    SEQUENCE = 'sequence'
    REGISTRAR = 'registrar'
    EXTENDER = 'extender'
    CALLABLE = 'callable'


@dataclass(frozen=True)
class Extension:
    kind: ExtensionKind
    target: Any


def _has_callable(obj: Any, name: str) -> bool:
    return callable(getattr(obj, name, None))


def classify_extension(extension: Any, output=None) -> Extension:
    """Decide which shape ``extension`` has.

    Raises:
        InvalidExtensionType: If it matches none of the supported shapes.
    """
    if isinstance(extension, (list, tuple)):
        return Extension(ExtensionKind.SEQUENCE, extension)
    if not inspect.isclass(extension):
        if _has_callable(extension, 'register_debug'):
            return Extension(ExtensionKind.REGISTRAR, extension)
        if _has_callable(extension, 'extend_debug'):
            return Extension(ExtensionKind.EXTENDER, extension)
    if callable(extension):
        return Extension(ExtensionKind.CALLABLE, extension)

    out = output or get_output()
    out.error(f"Unsupported extension type: {extension!r}")
    out.hint('extension.type', 'error')
    raise InvalidExtensionType(extension)


def load_extension(registry: Any, extension: Any, opts: Mapping = None,
                   output=None) -> Any:
    """Apply ``extension`` to ``registry`` and return the registry."""
    ext = classify_extension(extension, output)

    if ext.kind is ExtensionKind.SEQUENCE:
        for item in ext.target:
            load_extension(registry, item, opts, output)

    elif ext.kind is ExtensionKind.REGISTRAR:
        ext.target.register_debug(registry, opts)

    elif ext.kind is ExtensionKind.EXTENDER:
        func = ext.target.extend_debug
        # Rebind methods so the registry is the receiver
        func = getattr(func, '__func__', func)
        func(registry, opts)

    else:
        ext.target(registry, opts)

    return registry
