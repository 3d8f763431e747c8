"""
OutputManager — channel-gated output.

A message shows when message.level <= threshold, where the threshold is
the per-channel override if one exists, otherwise the global verbosity.
At threshold -4 (hard wall) nothing is written on that channel.

    <-- quieter ------------ default ------------ louder -->
    -4    -3     -2       -1      0        1       2      3
    wall  errors warnings minimal default  detail  config trace

The debug sink (``debug()``) writes at level 0 on the 'debug' channel,
so it is visible by default and silenced with ``debug:-1``.
"""

import sys
from typing import Any, Dict, Iterable, Optional, Set, TextIO

from . import channels as _channels
from .hints import get_hint
from .levels import DEFAULT, ERROR, NOTHING


class OutputManager:
    """Central coordinator for verbosity-gated output.

    All output goes to the configured file handle (default: stderr).
    Hints are shown at most once per manager.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Loaded {count} tags", channel='general', count=3)
        out.debug("cache miss", key)
        out.error("Unsupported tag type")
        out.hint('selector.type', 'error')
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file
        self._shown_hints: Set[str] = set()

    def _threshold(self, channel: str) -> int:
        return self.channel_overrides.get(channel, self.verbosity)

    def _write(self, text: str) -> None:
        # Resolve stderr lazily so pytest's capture sees our output.
        print(text, file=self.file if self.file is not None else sys.stderr)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self._threshold(channel)
        if threshold <= NOTHING:
            return
        if level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        self._write(text)

    def debug(self, *args: Any, channel: str = 'debug') -> None:
        """Debug sink: write ``args`` space-joined, like a console debug call."""
        self.emit(DEFAULT, " ".join(str(a) for a in args), channel=channel)

    def error(self, message: str, channel: str = 'error') -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(ERROR, message, channel=channel)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a hint if relevant for context, level, and not yet shown.

        Args:
            hint_id: Registry key for the hint
            context: Current context ('error', 'result', 'verbose')
            **kwargs: Values for template placeholders in hint message
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self._threshold('hint')
        if threshold <= NOTHING or h.min_level > threshold:
            return

        self._write(h.message.format(**kwargs) if kwargs else h.message)
        self._shown_hints.add(hint_id)

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on this channel would be shown."""
        threshold = self._threshold(channel)
        return threshold > NOTHING and 0 <= threshold

    @property
    def shown_hints(self) -> Set[str]:
        """Set of hint IDs displayed by this manager."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: Iterable[str] = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Args:
        verbosity: Global verbosity (0=default, positive=louder, negative=quieter)
        channels: Channel spec strings (e.g., ['debug:-1', 'hint:1'])
        file: Destination handle (default: stderr)

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    # Opt-in channels stay off unless a spec names them
    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}

    for spec in channels or ():
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
