#!/usr/bin/env python3
"""
Example: Find capo positions for some familiar progressions.

Runs the search over a handful of progressions and prints where the capo
goes, what to play instead, and which other frets would also work.

Usage:
    python examples/common_progressions.py
"""

from capo_finder import easy_frets, find_capo_position, parse_progression

PROGRESSIONS: dict[str, list[str]] = {
    "I-IV-V in F": ["F", "Bb", "C"],
    "I-V-vi-IV in B": ["B", "F#", "G#", "E"],
    "I-vi-IV-V in Ab": ["Ab", "F", "Db", "Eb"],
    "Already open (G-C-D)": ["G", "C", "D"],
    "Chromatic walk": ["C", "Db", "D", "Eb"],
}


def main() -> None:
    """Print the capo position for each example progression."""
    for title, names in PROGRESSIONS.items():
        progression = parse_progression(names)
        result = find_capo_position(progression)

        print(f"{title}: {' '.join(names)}")
        for line in result.describe().splitlines():
            print(f"  {line}")

        others = [fret for fret in easy_frets(progression) if fret != result.fret]
        if others:
            print(f"  Also works on frets: {', '.join(str(f) for f in others)}")
        print()


if __name__ == "__main__":
    main()
