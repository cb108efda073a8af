"""
Progression helpers.

A progression is an ordered tuple of PitchClass values. Order only matters
for display; barre classification is per chord.
"""

from __future__ import annotations

from collections.abc import Iterable

from .pitch import PitchClass

Progression = tuple[PitchClass, ...]


def parse_progression(names: Iterable[str]) -> Progression:
    """
    Parse chord names into a progression.

    Args:
        names: Chord root names, e.g. ["C", "F#", "Bb"]

    Returns:
        Tuple of pitch classes in input order

    Raises:
        InvalidChordName: On the first name that does not parse
    """
    return tuple(PitchClass.parse(name) for name in names)


def transpose_progression(progression: Iterable[PitchClass], semitones: int) -> Progression:
    """Transpose every chord by the same number of semitones."""
    return tuple(chord.transpose(semitones) for chord in progression)


def has_barre_chord(progression: Iterable[PitchClass]) -> bool:
    """Whether any chord in the progression needs a barre."""
    return any(chord.is_barre_chord() for chord in progression)


def spell_progression(progression: Iterable[PitchClass]) -> list[str]:
    """Canonical names of each chord, in order."""
    return [chord.spell() for chord in progression]
