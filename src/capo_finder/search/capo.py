"""
Capo search.

Tries each capo fret in increasing order and returns the first one where
no chord of the transposed progression needs a barre.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from capo_finder.constants import MAX_CAPO_FRET
from capo_finder.core.pitch import PitchClass
from capo_finder.core.progression import (
    has_barre_chord,
    spell_progression,
    transpose_progression,
)
from capo_finder.models.result import CapoResult, CapoStatus

logger = logging.getLogger(__name__)


def find_capo_position(progression: Iterable[PitchClass]) -> CapoResult:
    """
    Find the lowest capo fret that avoids every barre chord.

    Args:
        progression: Chord roots in playing order

    Returns:
        CapoResult with status already_easy (fret 0), found (fret 1-11)
        or not_found
    """
    chords = tuple(progression)
    original = spell_progression(chords)

    if not has_barre_chord(chords):
        logger.debug(f"No barre chords in {original}")
        return CapoResult(
            status=CapoStatus.ALREADY_EASY,
            fret=0,
            original=original,
            chords=list(original),
        )

    for fret in range(1, MAX_CAPO_FRET + 1):
        transposed = transpose_progression(chords, fret)
        if not has_barre_chord(transposed):
            names = spell_progression(transposed)
            logger.debug(f"Capo on fret {fret} turns {original} into {names}")
            return CapoResult(
                status=CapoStatus.FOUND,
                fret=fret,
                original=original,
                chords=names,
            )

    logger.debug(f"No capo position avoids barre chords for {original}")
    return CapoResult(status=CapoStatus.NOT_FOUND, original=original)


def easy_frets(progression: Iterable[PitchClass]) -> list[int]:
    """
    Every fret (0 = no capo) that makes the progression barre-free.

    The first entry, if any, is the fret find_capo_position reports.
    """
    chords = tuple(progression)
    return [
        fret
        for fret in range(MAX_CAPO_FRET + 1)
        if not has_barre_chord(transpose_progression(chords, fret))
    ]
