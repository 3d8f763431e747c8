"""
event_lib — synchronous publish/subscribe.

Public API:
    EventEmitter — string-keyed event emitter (on/once/off/trigger)
"""

from .emitter import EventEmitter, Listener

__all__ = ['EventEmitter', 'Listener']
