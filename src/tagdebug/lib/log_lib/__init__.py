"""
log_lib — channel-gated output with a single verbosity axis.

Public API:
    OutputManager      — central coordinator (emit/debug/error/hint)
    init_output        — singleton initialization
    get_output         — access singleton
    Hint               — hint dataclass
    register_hint      — register a hint
    register_hints     — register multiple hints
    get_hint           — look up hint by ID
    ChannelConfig      — channel configuration
    parse_channel_spec — parse a CHANNEL[:LEVEL] spec
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint, get_hints_by_category,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint', 'get_hints_by_category',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
]
