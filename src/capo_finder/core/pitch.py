"""
Pitch primitives - PitchClass and InvalidChordName.

PitchClass represents the 12 chromatic chord roots (octave-independent).
Flat spellings are canonical; sharp spellings are accepted when parsing.
"""

from __future__ import annotations

from enum import IntEnum

from capo_finder.constants import SEMITONES_PER_OCTAVE, ErrorMessages

# Display name mappings (module level to avoid IntEnum member issues)
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]
_SHARP_ALIASES: dict[str, int] = {
    "C#": 1,
    "D#": 3,
    "F#": 6,
    "G#": 8,
    "A#": 10,
}

# Roots with a common open shape in standard tuning
_OPEN_CHORD_VALUES: frozenset[int] = frozenset({0, 2, 3, 4, 7, 9})


class InvalidChordName(ValueError):
    """Raised when a string is not one of the accepted chord root names."""

    def __init__(self, name: str) -> None:
        super().__init__(ErrorMessages.UNKNOWN_CHORD.format(name=name))
        self.name = name


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11), named by their flat spelling.

    Enharmonic equivalents share the same value (C# == Db == 1).
    Members are immutable; transposition always returns another member.
    """

    C = 0
    Db = 1  # C# / Db
    D = 2
    Eb = 3  # D# / Eb
    E = 4
    F = 5
    Gb = 6  # F# / Gb
    G = 7
    Ab = 8  # G# / Ab
    A = 9
    Bb = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones, wrapping at the octave."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def is_barre_chord(self) -> bool:
        """
        Whether a chord on this root needs a barre fingering.

        Only the root is considered; chord quality and voicing are ignored.
        C, D, Eb, E, G and A are playable as open shapes, the rest are not.
        """
        return self.value not in _OPEN_CHORD_VALUES

    def spell(self) -> str:
        """Get the canonical (flat-spelled) name."""
        return _FLAT_NAMES[self.value]

    def __str__(self) -> str:
        return self.spell()

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a chord root from a string like 'C', 'Db' or 'C#'.

        Matching is exact and case-sensitive.

        Raises:
            InvalidChordName: If the string is not a known name or alias
        """
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        if name in _SHARP_ALIASES:
            return cls(_SHARP_ALIASES[name])

        raise InvalidChordName(name)

    @classmethod
    def names(cls) -> list[str]:
        """All canonical names in chromatic order from C."""
        return list(_FLAT_NAMES)

    @classmethod
    def aliases(cls) -> dict[str, str]:
        """Accepted sharp aliases mapped to their canonical names."""
        return {alias: _FLAT_NAMES[value] for alias, value in _SHARP_ALIASES.items()}

    @classmethod
    def easy(cls) -> list[PitchClass]:
        """Roots that can be played without a barre, in chromatic order."""
        return [member for member in cls if not member.is_barre_chord()]
