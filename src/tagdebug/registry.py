"""
TagRegistry — boolean debug tags with events.

Calling code switches named tags on and off, asks whether a tag (or any
of several tags) is active, and emits a debug message only when it is.
Every state change is published on the registry's event emitter.

Usage::

    dbg = TagRegistry(tags={'net': True})
    dbg.when('net', 'connected to', host)      # written to the debug sink
    if dbg.is_active(['db', 'net']):
        dump_state()
    dbg.on('toggle', lambda tag, value: print(tag, value))
    dbg.toggle('db')

Events (name: arguments):
    toggle       (tag, value)       once per single-tag change
    pre_update   (tags, reset)      before update()/set() changes anything
    post_update  (tags, reset)      after update()/set() applied everything
    when         (selector, args)   when() matched; args as a list
    <tag name>   (*args)            when() matched that tag
"""

from threading import RLock
from typing import Any, Dict, Iterator, List, Mapping

import tagdebug.hints  # noqa: F401  (registers error hints)
from tagdebug.config import DEFAULT_ENV_VAR, tags_from_env
from tagdebug.errors import InvalidConfigShape, InvalidSelectorType
from tagdebug.extensions import load_extension
from tagdebug.lib.event_lib import EventEmitter, Listener
from tagdebug.lib.log_lib import OutputManager, get_output
from tagdebug.options import (
    DEFAULT_OPTIONS, OptionSpec, init_options, need_mapping, update_options,
)


class TagRegistry:
    """Boolean debug tags, a wildcard override, and change events.

    Args:
        opts: Options mapping. Keyword arguments are merged over it.
            show_when (bool, True): write when() arguments to the debug sink.
            show_tag (bool, False): prefix the selector to that output.
            wildcard (str, '*'): tag that makes every query active.
            tags (mapping): initial tags, applied with update().
            observable (mapping): EventEmitter options, see observable().
            extend: extension(s) applied with extend(extend, opts).
        output: OutputManager for the debug sink and diagnostics.
            Defaults to the log_lib singleton.

    Attributes:
        tags: Dict of tag name to bool. Absent tags read as False.
        events: The EventEmitter that publishes registry events.
        initialized: True once construction has finished.
    """

    def __init__(self, opts: Mapping = None, *,
                 output: OutputManager = None, **kwargs: Any):
        self.output = output if output is not None else get_output()
        opts = {**need_mapping(opts, 'options', self.output), **kwargs}

        self._lock = RLock()
        self.initialized = False
        self.tags: Dict[str, bool] = {}
        self.options: Dict[str, OptionSpec] = dict(DEFAULT_OPTIONS)
        for spec in self.options.values():
            setattr(self, spec.name, spec.default)

        self.observable(opts.get('observable'))

        # Extensions may add options, so they load before options are set
        if opts.get('extend') is not None:
            self.extend(opts['extend'], opts)

        init_options(self, opts, self.options, self.output)
        self.update(opts.get('tags'))
        self.initialized = True

    @classmethod
    def from_env(cls, var: str = DEFAULT_ENV_VAR, opts: Mapping = None,
                 **kwargs: Any) -> 'TagRegistry':
        """Build a registry whose initial tags come from environment ``var``.

        Environment tags are merged over any ``tags`` option, so the
        environment wins for a tag named in both.
        """
        output = kwargs.pop('output', None)
        opts = {**need_mapping(opts, 'options', output or get_output()), **kwargs}
        tags = opts.get('tags')
        env_tags = tags_from_env(var)
        opts['tags'] = {**tags, **env_tags} if isinstance(tags, Mapping) else env_tags
        return cls(opts, output=output)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def observable(self, opts: Mapping = None) -> 'TagRegistry':
        """(Re)create the event emitter from a mapping of EventEmitter options.

        Existing subscriptions are dropped.

        Raises:
            InvalidConfigShape: If ``opts`` is not a mapping or names an
                option the emitter does not accept.
        """
        opts = need_mapping(opts, 'observable options', self.output)
        unknown = sorted(set(opts) - set(EventEmitter.OPTIONS))
        if unknown:
            self.output.error(f"Unknown observable options: {', '.join(map(str, unknown))}")
            self.output.hint('observable.options', 'error',
                             accepted=', '.join(EventEmitter.OPTIONS))
            raise InvalidConfigShape('observable options', opts,
                                     f"has unknown keys {unknown}")
        with self._lock:
            self.events = EventEmitter(**opts)
        return self

    def on(self, event: str, listener: Listener) -> 'TagRegistry':
        """Subscribe ``listener`` to ``event``."""
        self.events.on(event, listener)
        return self

    def once(self, event: str, listener: Listener) -> 'TagRegistry':
        """Subscribe ``listener`` for the next ``event`` only."""
        self.events.once(event, listener)
        return self

    def off(self, event: str, listener: Listener = None) -> 'TagRegistry':
        """Unsubscribe ``listener``, or every listener of ``event``."""
        self.events.off(event, listener)
        return self

    def trigger(self, event: str, *args: Any) -> 'TagRegistry':
        """Publish ``event`` with ``args`` to its listeners."""
        self.events.trigger(event, *args)
        return self

    # ------------------------------------------------------------------
    # Options and extensions
    # ------------------------------------------------------------------
    def opt(self, opts: Mapping = None, **kwargs: Any) -> 'TagRegistry':
        """Change option values after construction.

        Only options declared in ``self.options`` are accepted, and each
        value is type checked against its declaration.

        Raises:
            InvalidOptionType: If a key is unknown or a value has the wrong type.
            InvalidConfigShape: If ``opts`` is not a mapping.
        """
        opts = {**need_mapping(opts, 'options', self.output), **kwargs}
        with self._lock:
            update_options(self, opts, self.options, self.output)
        return self

    def add_option(self, name: str, default: Any,
                   type_: type = None) -> 'TagRegistry':
        """Declare a typed option on this instance and set it to ``default``.

        Meant for extensions. Once declared, the option is validated by
        ``opt()`` like the built-in ones.
        """
        spec = OptionSpec(name, default, type_)
        with self._lock:
            self.options[name] = spec
            setattr(self, name, default)
        return self

    def extend(self, extension: Any, opts: Mapping = None) -> 'TagRegistry':
        """Apply one extension, or a list of them, to this registry.

        See ``tagdebug.extensions`` for the accepted shapes.

        Raises:
            InvalidExtensionType: If ``extension`` has none of those shapes.
        """
        with self._lock:
            return load_extension(self, extension, opts, self.output)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------
    def _reject_selector(self, selector: Any):
        self.output.error(f"Unsupported tag type: {selector!r}")
        self.output.hint('selector.type', 'error')
        raise InvalidSelectorType(selector)

    def toggle(self, tags: Any = None, value: Any = None) -> 'TagRegistry':
        """Toggle one or more tags.

        Args:
            tags: A tag name, a list/tuple of them, or None for every tag
                currently in the map (True or False).
            value: New value. None flips the current value (an absent tag
                becomes True). Anything else is stored as ``bool(value)``,
                so only real bools end up in ``tags``; note that the
                string 'false' is truthy and switches the tag on.

        Raises:
            InvalidSelectorType: If ``tags`` is not one of the above.
        """
        with self._lock:
            if tags is None:
                for tag in list(self.tags):
                    self.toggle(tag, value)

            elif isinstance(tags, (list, tuple)):
                for tag in tags:
                    self.toggle(tag, value)

            elif isinstance(tags, str):
                if value is None:
                    new = not self.tags.get(tags, False)
                else:
                    new = bool(value)
                self.tags[tags] = new
                self.events.trigger('toggle', tags, new)

            else:
                self._reject_selector(tags)

        return self

    def is_active(self, tags: Any) -> bool:
        """True if the wildcard tag is set, or if the tag (any of the tags) is.

        An empty list/tuple and None are never active unless the wildcard is.

        Raises:
            InvalidSelectorType: If ``tags`` is not a str, list/tuple or None.
        """
        with self._lock:
            if self.tags.get(self.wildcard, False):
                return True

            if isinstance(tags, (list, tuple)):
                return any(self.is_active(tag) for tag in tags)
            if isinstance(tags, str):
                return self.tags.get(tags, False)
            if tags is None:
                return False
            self._reject_selector(tags)

    def __contains__(self, tag: str) -> bool:
        return self.is_active(tag)

    def _event_names(self, tags: Any) -> Iterator[str]:
        if isinstance(tags, (list, tuple)):
            for tag in tags:
                yield from self._event_names(tag)
        elif isinstance(tags, str):
            yield tags

    def when(self, tags: Any, *args: Any) -> 'TagRegistry':
        """If ``is_active(tags)``, log ``args`` and publish events.

        The debug sink gets ``args`` when ``show_when`` is set, preceded by
        ``tags`` when ``show_tag`` is set. Then ``when(tags, list(args))``
        is published, followed by an event named after each tag in
        ``tags`` carrying ``*args``.
        """
        with self._lock:
            if not self.is_active(tags):
                return self

            if self.show_when:
                shown = (tags,) + args if self.show_tag else args
                self.output.debug(*shown)

            self.events.trigger('when', tags, list(args))
            for name in self._event_names(tags):
                self.events.trigger(name, *args)

        return self

    def update(self, tags: Mapping = None, reset: bool = True) -> 'TagRegistry':
        """Update many tags at once.

        Args:
            tags: Mapping of tag name to value; each item goes through
                ``toggle(name, value)``. Anything that is not a mapping
                is ignored.
            reset: If True, start from an empty tag map.
        """
        with self._lock:
            self.events.trigger('pre_update', tags, reset)

            if reset:
                self.tags = {}

            if isinstance(tags, Mapping):
                for name, value in tags.items():
                    self.toggle(name, value)

            self.events.trigger('post_update', tags, reset)
        return self

    def set(self, tags: Mapping = None, reset: bool = False) -> 'TagRegistry':
        """``update()`` that keeps existing tags unless ``reset`` is given."""
        return self.update(tags, reset)

    def enabled_tags(self) -> List[str]:
        """Sorted names of the tags that are currently True."""
        with self._lock:
            return sorted(tag for tag, value in self.tags.items() if value)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(tags={self.tags!r}, "
                f"show_when={self.show_when!r}, show_tag={self.show_tag!r}, "
                f"wildcard={self.wildcard!r})")
