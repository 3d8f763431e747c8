"""
Verbosity level constants.

Informational only. The manager compares raw integers:

    message.level <= threshold  ->  message is shown

The threshold is the global verbosity or a per-channel override.

    <-- quieter ------------ default ------------ louder -->
    -4    -3     -2       -1      0        1       2      3
    wall  errors warnings minimal default  detail  config trace
"""

TRACE = 3          # Internal state
CONFIG = 2         # Option changes
DETAIL = 1         # Extra context around results
DEFAULT = 0        # Default output, including the debug sink

MINIMAL = -1       # Silences a channel that sits at DEFAULT
WARNING = -2
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall
