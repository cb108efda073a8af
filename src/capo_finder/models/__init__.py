"""
Data models.

- CapoResult: Outcome of a capo search
- CapoStatus: already_easy / found / not_found
"""

from capo_finder.models.result import CapoResult, CapoStatus

__all__ = [
    "CapoResult",
    "CapoStatus",
]
