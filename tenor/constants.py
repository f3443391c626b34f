"""Generation constants.

Rhythm is counted on a sixteenth-note grid: a note value ``v`` covers
``SIXTEENTH // v`` slots (a quarter note, ``v = 4``, covers four).

- `BEAT_SIZES`: beat group sizes drawn by the time signature generator
- `MAX_FINAL_BEAT`: largest remainder kept as the closing beat of a measure
- `DEFAULT_KEEP_PROBABILITY`: chance an event survives chordify
- `MAX_WALK_ATTEMPTS`: rejected candidates tolerated per interval walk move
"""

# Grid resolution

SIXTEENTH = 16
NOTE_VALUES = (1, 2, 4, 8, 16)

# Time signatures

BEAT_SIZES = (2, 3, 4)
MAX_FINAL_BEAT = 3

# Defaults

DEFAULT_NOTE_VALUE = 16
DEFAULT_SPARSENESS = 1
DEFAULT_KEEP_PROBABILITY = 0.2
DEFAULT_BASE_TIME = 0.125

# Interval walk

MAX_WALK_ATTEMPTS = 1000
