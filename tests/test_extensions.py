"""
Tests for tagdebug.extensions — classification and loading of extensions.
"""

import types

import pytest

from tagdebug import (
    Extension, ExtensionKind, InvalidExtensionType, TagRegistry,
    classify_extension,
)


class Registrar:
    def __init__(self):
        self.calls = []

    def register_debug(self, registry, opts):
        self.calls.append((registry, opts))
        registry.registered = True


class Extender:
    def extend_debug(self, opts):
        # ``self`` is the registry here
        self.extended_with = opts


def add_counter(registry, opts):
    registry.counter = 0

    def count(tag, value):
        registry.counter += 1

    registry.on('toggle', count)


class TestClassify:
    """Each shape is recognised once, up front."""

    def test_sequence(self):
        assert classify_extension([add_counter]).kind is ExtensionKind.SEQUENCE
        assert classify_extension((add_counter,)).kind is ExtensionKind.SEQUENCE

    def test_registrar(self):
        ext = Registrar()
        assert classify_extension(ext) == Extension(ExtensionKind.REGISTRAR, ext)

    def test_extender(self):
        assert classify_extension(Extender()).kind is ExtensionKind.EXTENDER

    def test_registrar_checked_before_extender(self):
        both = types.SimpleNamespace(register_debug=lambda r, o: None,
                                     extend_debug=lambda r, o: None)
        assert classify_extension(both).kind is ExtensionKind.REGISTRAR

    def test_callable(self):
        assert classify_extension(add_counter).kind is ExtensionKind.CALLABLE

    @pytest.mark.parametrize("value", [None, 3, "ext", {'a': 1},
                                       types.SimpleNamespace(register_debug=True)])
    def test_unsupported(self, value, out, buf):
        with pytest.raises(InvalidExtensionType) as excinfo:
            classify_extension(value, out)
        assert excinfo.value.extension is value
        assert "Unsupported extension type" in buf.getvalue()


class TestExtend:
    """extend() applies extensions to the registry and returns it."""

    def test_registrar_gets_registry_and_opts(self, registry):
        ext = Registrar()
        assert registry.extend(ext, {'x': 1}) is registry
        assert ext.calls == [(registry, {'x': 1})]
        assert registry.registered is True

    def test_extender_receiver_is_registry(self, registry):
        registry.extend(Extender(), {'y': 2})
        assert registry.extended_with == {'y': 2}

    def test_extender_namespace_function(self, registry):
        def extend_debug(target, opts):
            target.ns_opts = opts

        registry.extend(types.SimpleNamespace(extend_debug=extend_debug), 'o')
        assert registry.ns_opts == 'o'

    def test_callable_subscribes_to_events(self, registry):
        registry.extend(add_counter)
        registry.toggle(['a', 'b'])
        assert registry.counter == 2

    def test_sequence_in_order(self, registry):
        order = []
        registry.extend([
            lambda r, o: order.append(1),
            [lambda r, o: order.append(2), lambda r, o: order.append(3)],
        ])
        assert order == [1, 2, 3]

    def test_sequence_stops_at_first_failure(self, registry):
        order = []
        with pytest.raises(InvalidExtensionType):
            registry.extend([lambda r, o: order.append(1), 42,
                             lambda r, o: order.append(3)])
        assert order == [1]

    def test_extension_errors_propagate(self, registry):
        def broken(r, o):
            raise ValueError("bad extension")

        with pytest.raises(ValueError, match="bad extension"):
            registry.extend(broken)

    def test_invalid_is_type_error(self, registry):
        with pytest.raises(TypeError):
            registry.extend(42)


class TestExtendAtConstruction:
    """The ``extend`` option loads extensions with the full options."""

    def test_gets_full_options(self, out):
        ext = Registrar()
        dbg = TagRegistry({'extend': ext, 'tags': {'a': True}}, output=out)
        (registry, opts), = ext.calls
        assert registry is dbg
        assert opts['tags'] == {'a': True}

    def test_sees_initial_update(self, out):
        dbg = TagRegistry(extend=add_counter, tags={'a': True, 'b': True}, output=out)
        assert dbg.counter == 2

    def test_can_listen_for_pre_update(self, out):
        seen = []

        def watch(registry, opts):
            registry.on('pre_update', lambda tags, reset: seen.append((tags, reset)))

        TagRegistry(extend=watch, tags={'a': True}, output=out)
        assert seen == [({'a': True}, True)]

    def test_invalid_extension_fails_construction(self, out):
        with pytest.raises(InvalidExtensionType):
            TagRegistry(extend=42, output=out)
