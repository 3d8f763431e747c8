"""
Synchronous string-keyed event emitter.

Any string is a valid event name. Listeners run in subscription order
before ``trigger()`` returns; exceptions raised by a listener propagate
to whoever triggered the event.

Usage::

    events = EventEmitter()
    events.on('toggle', lambda tag, value: print(tag, value))
    events.trigger('toggle', 'net', True)
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

Listener = Callable[..., Any]


class EventEmitter:
    """Publish/subscribe primitive.

    Args:
        wildcard: Optional catch-all event name. Listeners on it receive
            every event as ``(event_name, *args)``. Off by default.
    """

    # Keyword options accepted by __init__
    OPTIONS = ('wildcard',)

    def __init__(self, wildcard: Optional[str] = None):
        self.wildcard = wildcard
        self._listeners: Dict[str, List[Listener]] = {}
        self._once: List[Tuple[str, Listener]] = []

    def on(self, event: str, listener: Listener) -> 'EventEmitter':
        """Subscribe ``listener`` to ``event``."""
        if not callable(listener):
            raise TypeError(f"Listener for {event!r} is not callable")
        self._listeners.setdefault(event, []).append(listener)
        return self

    def once(self, event: str, listener: Listener) -> 'EventEmitter':
        """Subscribe ``listener`` for a single delivery of ``event``."""
        self.on(event, listener)
        self._once.append((event, listener))
        return self

    def off(self, event: str, listener: Listener = None) -> 'EventEmitter':
        """Unsubscribe one listener, or every listener when none is given."""
        self._once = [(e, l) for e, l in self._once
                      if e != event or (listener is not None and l != listener)]
        if listener is None:
            self._listeners.pop(event, None)
            return self
        handlers = self._listeners.get(event, [])
        if listener in handlers:
            handlers.remove(listener)
        if not handlers:
            self._listeners.pop(event, None)
        return self

    def listeners(self, event: str) -> List[Listener]:
        return list(self._listeners.get(event, []))

    def trigger(self, event: str, *args: Any) -> 'EventEmitter':
        """Deliver ``args`` to every listener of ``event``."""
        # Snapshot so subscribe/unsubscribe during delivery waits for the next trigger
        for listener in self.listeners(event):
            self._consume_once(event, listener)
            listener(*args)

        if self.wildcard is not None and event != self.wildcard:
            for listener in self.listeners(self.wildcard):
                self._consume_once(self.wildcard, listener)
                listener(event, *args)
        return self

    def _consume_once(self, event: str, listener: Listener) -> None:
        # One delivery spends exactly one once() registration
        if (event, listener) not in self._once:
            return
        self._once.remove((event, listener))
        handlers = self._listeners.get(event, [])
        if listener in handlers:
            handlers.remove(listener)
        if not handlers:
            self._listeners.pop(event, None)
