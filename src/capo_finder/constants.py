"""
Constants for the capo finder.

No magic strings - output sentences and error templates live here.
"""

from typing import Literal

SEMITONES_PER_OCTAVE = 12

# Fret 12 puts every chord back on its original pitch class
MAX_CAPO_FRET = SEMITONES_PER_OCTAVE - 1

# Output formats understood by the CLI
OutputFormat = Literal["text", "json", "yaml"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "yaml")


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_CHORD = "Unknown chord: {name}"


class OutputMessages:
    """Sentences printed for each search outcome."""

    ALREADY_EASY = "Given chord progression already has no barre chords!"
    FOUND = "Chord progression found! It needs a capo on fret {fret}"
    NOT_FOUND = "Couldn't find a progression without barre chords"
