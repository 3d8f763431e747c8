"""Tag configuration from the environment.

Lets a program turn debug tags on without code changes:

    TAGDEBUG="net,db=off,-cache" python app.py

Spec syntax: names separated by commas and/or whitespace.
  name            -> True
  -name / !name   -> False
  name=VALUE      -> VALUE is one of true/false, 1/0, on/off, yes/no
"""

import os
import re
from typing import Dict, Mapping

from tagdebug.errors import InvalidConfigShape
from tagdebug.lib.log_lib import get_output


DEFAULT_ENV_VAR = "TAGDEBUG"

TRUE_WORDS = {"1", "true", "on", "yes"}
FALSE_WORDS = {"0", "false", "off", "no"}

_SPLIT = re.compile(r"[,\s]+")


def _bad_spec(spec: str, detail: str):
    out = get_output()
    out.error(f"Invalid tag spec {spec!r}: {detail}")
    out.hint('config.env', 'error')
    raise InvalidConfigShape("tag spec", spec, detail)


def parse_tag_spec(spec: str) -> Dict[str, bool]:
    """Parse a tag spec string into a tag mapping.

    Later entries win, so "net,-net" leaves net off.
    """
    tags: Dict[str, bool] = {}
    for item in _SPLIT.split(spec.strip()):
        if not item:
            continue
        name, sep, raw = item.partition("=")
        if sep:
            word = raw.strip().lower()
            if word in TRUE_WORDS:
                value = True
            elif word in FALSE_WORDS:
                value = False
            else:
                _bad_spec(spec, f"unknown value {raw!r} for {name!r}")
        elif name[0] in "-!":
            name, value = name[1:], False
        else:
            value = True
        if not name:
            _bad_spec(spec, f"empty tag name in {item!r}")
        tags[name] = value
    return tags


def tags_from_env(var: str = DEFAULT_ENV_VAR,
                  environ: Mapping[str, str] = None) -> Dict[str, bool]:
    """Read and parse the tag spec in ``var``; empty when unset."""
    env = os.environ if environ is None else environ
    spec = env.get(var)
    if not spec:
        return {}
    return parse_tag_spec(spec)
