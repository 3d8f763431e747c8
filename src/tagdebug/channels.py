"""tagdebug channel definitions for log_lib.

Keeps log_lib itself project-agnostic; call ``configure_channels()`` once
before ``init_output()`` to use this set.
"""

from tagdebug.lib.log_lib import channels as _ch


TAGDEBUG_CHANNELS = {
    'debug',        # when() output
    'options',      # Option changes
    'error',        # Diagnostics written before an error is raised
    'hint',         # Contextual tips
    'general',      # Default channel
}

TAGDEBUG_CHANNEL_DESCRIPTIONS = {
    'debug':   'Messages passed to when() for active tags',
    'options': 'Option changes after construction',
    'error':   'Diagnostics for invalid selectors, options and extensions',
    'hint':    'Contextual tips and suggestions',
    'general': 'General output',
}

TAGDEBUG_OPT_IN_CHANNELS = {
    'options',
}


def configure_channels():
    """Override log_lib's default channels with the tagdebug set."""
    _ch.KNOWN_CHANNELS = TAGDEBUG_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = TAGDEBUG_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = TAGDEBUG_OPT_IN_CHANNELS
