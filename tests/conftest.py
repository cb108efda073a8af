"""
Pytest configuration and shared fixtures.
"""

import pytest

from capo_finder.core import PitchClass


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A mock MCP server for registering tools."""
    return MockMCPServer("test")


@pytest.fixture
def all_pitch_classes() -> list[PitchClass]:
    """All 12 pitch classes in chromatic order."""
    return list(PitchClass)
