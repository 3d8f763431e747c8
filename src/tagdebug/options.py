"""Typed instance options.

Each option is declared once as an ``OptionSpec``; construction and later
updates both look up the expected type from that declaration.

    show_when  bool  True   send when() arguments to the debug sink
    show_tag   bool  False  prefix the tested selector to that output
    wildcard   str   '*'    tag that makes every query active
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from tagdebug.errors import InvalidConfigShape, InvalidOptionType
from tagdebug.lib.log_lib import OutputManager
from tagdebug.lib.log_lib.levels import CONFIG


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of a typed option.

    ``type`` defaults to the type of ``default``. A ``bool`` value is only
    accepted where ``bool`` (or ``object``) is declared, so ``1`` is never
    a valid flag and ``True`` is never a valid count.
    """
    name: str
    default: Any
    type: Optional[type] = None

    def __post_init__(self):
        if self.type is None:
            object.__setattr__(self, 'type', type(self.default))

    def check(self, value: Any) -> bool:
        if isinstance(value, bool) and self.type not in (bool, object):
            return False
        return isinstance(value, self.type)


DEFAULT_OPTIONS: Dict[str, OptionSpec] = {
    spec.name: spec for spec in (
        OptionSpec('show_when', True),
        OptionSpec('show_tag', False),
        OptionSpec('wildcard', '*'),
    )
}


def need_mapping(value: Any, what: str, output: OutputManager) -> Mapping:
    """Return ``value`` (``None`` becomes ``{}``) or raise InvalidConfigShape."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        output.error(f"{what} must be a mapping, got {value!r}")
        raise InvalidConfigShape(what, value)
    return value


def _reject(name: str, value: Any, spec: Optional[OptionSpec],
            output: OutputManager) -> None:
    output.error(f"Invalid value for {name} option: {value!r}")
    if spec is not None:
        output.hint('option.type', 'error',
                    option=name, expected=spec.type.__name__)
    raise InvalidOptionType(name, value)


def init_options(target: Any, opts: Mapping, schema: Mapping[str, OptionSpec],
                 output: OutputManager) -> None:
    """Set every schema option on ``target``, using defaults for unset keys."""
    opts = need_mapping(opts, 'options', output)
    for name, spec in schema.items():
        value = opts.get(name)
        if value is None:
            setattr(target, name, spec.default)
        elif spec.check(value):
            setattr(target, name, value)
        else:
            _reject(name, value, spec, output)


def update_options(target: Any, opts: Mapping, schema: Mapping[str, OptionSpec],
                   output: OutputManager) -> None:
    """Set only the given options on ``target``; no defaults are applied.

    Every value is checked before any is assigned, so a rejected update
    leaves ``target`` untouched.
    """
    opts = need_mapping(opts, 'options', output)
    for name, value in opts.items():
        spec = schema.get(name)
        if spec is None or not spec.check(value):
            _reject(name, value, spec, output)

    for name, value in opts.items():
        setattr(target, name, value)
        output.emit(CONFIG, "option {name} = {value!r}",
                    channel='options', name=name, value=value)
