"""Project-agnostic support libraries bundled with tagdebug."""
