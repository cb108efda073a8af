"""
Capo tools - MCP tools for capo search and chord classification.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from capo_finder.core import PitchClass, parse_progression
from capo_finder.search import easy_frets, find_capo_position

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_capo_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register capo tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def capo_find_position(chords: list[str]) -> str:
        """
        Find the lowest capo fret that avoids barre chords.

        Transposes the progression up one fret at a time (1-11) and
        returns the first position where every chord has an open shape.

        Args:
            chords: Chord roots in playing order (e.g., ['F', 'Bb', 'C'])

        Returns:
            JSON string with the search result and every other fret that works

        Example:
            capo_find_position(chords=["Db", "F"])
        """
        try:
            progression = parse_progression(chords)
            result = find_capo_position(progression)

            return json.dumps(
                {
                    "status": "success",
                    "result": result.to_yaml_dict(),
                    "message": result.describe(),
                    "alternatives": [
                        fret for fret in easy_frets(progression) if fret != result.fret
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to find capo position")
            return json.dumps({"status": "error", "message": str(e)})

    tools["capo_find_position"] = capo_find_position

    @mcp.tool  # type: ignore[arg-type]
    async def capo_classify_chords(chords: list[str]) -> str:
        """
        Classify chords as open or barre.

        Args:
            chords: Chord roots (sharp or flat spelling)

        Returns:
            JSON string with the canonical name and barre flag per chord

        Example:
            capo_classify_chords(chords=["C#", "E", "A"])
        """
        try:
            progression = parse_progression(chords)

            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        {"chord": chord.spell(), "barre": chord.is_barre_chord()}
                        for chord in progression
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to classify chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["capo_classify_chords"] = capo_classify_chords

    @mcp.tool  # type: ignore[arg-type]
    async def capo_list_chords() -> str:
        """
        List the chord names this server understands.

        Returns:
            JSON string with canonical names, sharp aliases and open-shape roots

        Example:
            capo_list_chords()
        """
        return json.dumps(
            {
                "status": "success",
                "chords": PitchClass.names(),
                "aliases": PitchClass.aliases(),
                "open": [chord.spell() for chord in PitchClass.easy()],
            }
        )

    tools["capo_list_chords"] = capo_list_chords

    return tools
