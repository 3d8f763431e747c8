"""Shared test fixtures for the tagdebug test suite."""

import io

import pytest

from tagdebug import TagRegistry
from tagdebug.lib.log_lib import OutputManager
from tagdebug.lib.log_lib import manager as _manager_mod


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def out(buf):
    """An OutputManager writing to a buffer (verbosity=0)."""
    return OutputManager(verbosity=0, file=buf)


@pytest.fixture
def registry(out):
    """A TagRegistry with default options, writing to the ``out`` buffer."""
    return TagRegistry(output=out)


@pytest.fixture
def recorder():
    """Listener factory that records the arguments of every call.

    Usage::

        seen = recorder()
        registry.on('toggle', seen)
        ...
        assert seen.calls == [('a', True)]
    """
    class _Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args)

    return _Recorder


@pytest.fixture
def reset_output_singleton():
    """Restore the log_lib singleton after a test replaces it."""
    old = _manager_mod._manager
    yield
    _manager_mod._manager = old
