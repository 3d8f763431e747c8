"""tagdebug hints, shown once after an error diagnostic.

Import this module to register them with the global registry.
"""

from tagdebug.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='selector.type',
        message=('  Tip: a tag selector is a tag name, a list/tuple of tag '
                 'names, or None for every known tag.'),
        context={'error'},
        min_level=0,
        category='selector',
    ),
    Hint(
        id='option.type',
        message='  Tip: {option} expects a value of type {expected}.',
        context={'error'},
        min_level=0,
        category='options',
    ),
    Hint(
        id='extension.type',
        message=('  Tip: an extension is a callable, an object with '
                 'register_debug(registry, opts) or extend_debug(opts), '
                 'or a list of those.'),
        context={'error'},
        min_level=0,
        category='extensions',
    ),
    Hint(
        id='observable.options',
        message='  Tip: observable options accept only: {accepted}.',
        context={'error'},
        min_level=0,
        category='events',
    ),
    Hint(
        id='config.env',
        message=('  Tip: tag specs look like "net,db=off,-cache". '
                 'Use a leading - or ! to switch a tag off.'),
        context={'error'},
        min_level=0,
        category='config',
    ),
)
