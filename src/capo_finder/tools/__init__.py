"""
MCP tool implementations.

- capo - Capo search and chord classification
"""

from capo_finder.tools.capo import register_capo_tools

__all__ = [
    "register_capo_tools",
]
