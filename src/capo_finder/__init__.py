"""
Capo finder - place a capo so a chord progression needs no barre chords.
"""

from capo_finder.core import InvalidChordName, PitchClass, parse_progression
from capo_finder.models import CapoResult, CapoStatus
from capo_finder.search import easy_frets, find_capo_position

__version__ = "0.1.0"

__all__ = [
    "CapoResult",
    "CapoStatus",
    "InvalidChordName",
    "PitchClass",
    "easy_frets",
    "find_capo_position",
    "parse_progression",
]
