"""
Capo position search.
"""

from capo_finder.search.capo import easy_frets, find_capo_position

__all__ = [
    "easy_frets",
    "find_capo_position",
]
