"""
Core primitives.

- PitchClass: The 12 chromatic chord roots (0-11) with barre classification
- InvalidChordName: Raised for names that are not chord roots
- Progression: Ordered tuple of PitchClass values and helpers over it
"""

from capo_finder.core.pitch import InvalidChordName, PitchClass
from capo_finder.core.progression import (
    Progression,
    has_barre_chord,
    parse_progression,
    spell_progression,
    transpose_progression,
)

__all__ = [
    # Pitch
    "PitchClass",
    "InvalidChordName",
    # Progression
    "Progression",
    "parse_progression",
    "transpose_progression",
    "has_barre_chord",
    "spell_progression",
]
