"""
Channel configuration and parsing.

Channels are named output categories. Each one may pin its own verbosity
threshold, overriding the global level.

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        debug       # level 0
        debug:-1    # silence the debug sink
        error:-4    # nothing at all on the error channel
"""

from dataclasses import dataclass
from typing import Dict, Set


# Channels a bare OutputManager knows about. Projects replace these.
KNOWN_CHANNELS: Set[str] = {
    'debug',        # Debug sink
    'error',        # Error messages
    'hint',         # Hint messages
    'general',      # Default channel
}

CHANNEL_DESCRIPTIONS: Dict[str, str] = {
    'debug':   'Debug sink output',
    'error':   'Error messages',
    'hint':    'Contextual tips and suggestions',
    'general': 'General output',
}

# Channels that are OFF unless explicitly enabled.
OPT_IN_CHANNELS: Set[str] = set()


@dataclass
class ChannelConfig:
    """Configuration for a single output channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a ``CHANNEL[:LEVEL]`` string into a ChannelConfig.

    Args:
        spec: Channel spec string like "debug" or "debug:-1"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: If the level part is not an integer.
    """
    name, _, level = spec.partition(':')
    return ChannelConfig(name=name.strip(),
                         level=int(level) if level.strip() else 0)


def format_channel_list() -> str:
    """Format the list of known channels for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
