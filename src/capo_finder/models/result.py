"""
Capo result model.

The outcome of a capo search: whether the progression was already easy,
which fret makes it easy, or that no fret does.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from capo_finder.constants import MAX_CAPO_FRET, OutputMessages
from capo_finder.core.pitch import PitchClass


class CapoStatus(str, Enum):
    """Search outcomes."""

    ALREADY_EASY = "already_easy"
    FOUND = "found"
    NOT_FOUND = "not_found"


class CapoResult(BaseModel):
    """
    Result of searching for a capo position.

    Chords are stored by canonical name so the model serializes cleanly.
    """

    status: CapoStatus = Field(..., description="Search outcome")
    fret: int | None = Field(
        None, ge=0, le=MAX_CAPO_FRET, description="Capo fret (0 means no capo needed)"
    )
    original: list[str] = Field(default_factory=list, description="Input chords")
    chords: list[str] = Field(
        default_factory=list, description="Chords to play with the capo on"
    )

    @field_validator("original", "chords")
    @classmethod
    def validate_chord_names(cls, v: list[str]) -> list[str]:
        """Chord names must be canonical spellings."""
        canonical = PitchClass.names()
        for name in v:
            if name not in canonical:
                raise ValueError(f"Not a canonical chord name: {name}")
        return v

    @model_validator(mode="after")
    def validate_fret_for_status(self) -> CapoResult:
        """Fret must match the outcome: 0, 1-11 or None."""
        if self.status == CapoStatus.ALREADY_EASY and self.fret != 0:
            raise ValueError(f"already_easy needs fret 0, got {self.fret}")
        if self.status == CapoStatus.FOUND and (self.fret is None or self.fret < 1):
            raise ValueError(f"found needs a fret from 1 to {MAX_CAPO_FRET}, got {self.fret}")
        if self.status == CapoStatus.NOT_FOUND and self.fret is not None:
            raise ValueError(f"not_found has no fret, got {self.fret}")
        return self

    @property
    def found(self) -> bool:
        """Whether the progression can be played without barre chords."""
        return self.status != CapoStatus.NOT_FOUND

    def describe(self) -> str:
        """Human-readable summary, one line per output line."""
        if self.status == CapoStatus.ALREADY_EASY:
            return OutputMessages.ALREADY_EASY
        if self.status == CapoStatus.FOUND:
            header = OutputMessages.FOUND.format(fret=self.fret)
            return f"{header}\n{' '.join(self.chords)}"
        return OutputMessages.NOT_FOUND

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "status": self.status.value,
            "fret": self.fret,
            "original": list(self.original),
            "chords": list(self.chords),
        }
