#!/usr/bin/env python3
"""
Async Capo Finder MCP Server using chuk-mcp-server

The server provides tools for:
- Finding the lowest capo fret that removes barre chords from a progression
- Classifying chord roots as open or barre shapes
- Listing the accepted chord names
"""

import logging

from chuk_mcp_server import ChukMCPServer

from capo_finder.tools import register_capo_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("capo-finder")

# Register all tools
capo_tools = register_capo_tools(mcp)

# Export tool functions for direct access
capo_find_position = capo_tools["capo_find_position"]
capo_classify_chords = capo_tools["capo_classify_chords"]
capo_list_chords = capo_tools["capo_list_chords"]

logger.info("Capo Finder MCP Server initialized")
logger.info(f"  Tools: {', '.join(capo_tools)}")
