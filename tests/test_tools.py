"""
Tests for MCP tools.
"""

import json

import pytest

from capo_finder.tools.capo import register_capo_tools


class TestCapoTools:
    """Tests for capo tools."""

    def test_registers_tools(self, mcp):
        """All tools are registered with the server."""
        tools = register_capo_tools(mcp)
        assert set(tools) == {"capo_find_position", "capo_classify_chords", "capo_list_chords"}
        assert set(mcp.tools) == set(tools)

    @pytest.mark.asyncio
    async def test_find_position(self, mcp):
        """Find position returns the result and the other working frets."""
        tools = register_capo_tools(mcp)

        result = await tools["capo_find_position"](chords=["F"])
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["result"]["fret"] == 2
        assert data["result"]["chords"] == ["G"]
        assert data["alternatives"] == [4, 7, 9, 10, 11]
        assert data["message"].startswith("Chord progression found!")

    @pytest.mark.asyncio
    async def test_find_position_already_easy(self, mcp):
        """Already-easy progressions report fret 0."""
        tools = register_capo_tools(mcp)

        data = json.loads(await tools["capo_find_position"](chords=["C", "G"]))
        assert data["result"]["status"] == "already_easy"
        assert data["result"]["fret"] == 0
        assert 0 not in data["alternatives"]

    @pytest.mark.asyncio
    async def test_find_position_not_found(self, mcp):
        """No working fret means no alternatives either."""
        tools = register_capo_tools(mcp)

        data = json.loads(await tools["capo_find_position"](chords=["C", "Db", "D", "Eb"]))
        assert data["status"] == "success"
        assert data["result"]["status"] == "not_found"
        assert data["alternatives"] == []

    @pytest.mark.asyncio
    async def test_find_position_invalid(self, mcp):
        """Invalid chord names return an error envelope."""
        tools = register_capo_tools(mcp)

        data = json.loads(await tools["capo_find_position"](chords=["C", "H"]))
        assert data["status"] == "error"
        assert "H" in data["message"]

    @pytest.mark.asyncio
    async def test_classify_chords(self, mcp):
        """Classify reports canonical names and barre flags."""
        tools = register_capo_tools(mcp)

        data = json.loads(await tools["capo_classify_chords"](chords=["C#", "E", "Bb"]))
        assert data["status"] == "success"
        assert data["chords"] == [
            {"chord": "Db", "barre": True},
            {"chord": "E", "barre": False},
            {"chord": "Bb", "barre": True},
        ]

    @pytest.mark.asyncio
    async def test_classify_chords_invalid(self, mcp):
        """Classify rejects unknown names."""
        tools = register_capo_tools(mcp)

        data = json.loads(await tools["capo_classify_chords"](chords=["Z"]))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_chords(self, mcp):
        """List returns names, aliases and open roots."""
        tools = register_capo_tools(mcp)

        data = json.loads(await tools["capo_list_chords"]())
        assert len(data["chords"]) == 12
        assert data["aliases"]["F#"] == "Gb"
        assert data["open"] == ["C", "D", "Eb", "E", "G", "A"]
