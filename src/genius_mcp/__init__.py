"""Genius MCP Server - Model Context Protocol integration for the Genius API.

This package provides a Model Context Protocol (MCP) server that exposes Genius
song and artist metadata, plus lyrics scraped from Genius song pages, to LLM
applications like Claude Desktop.

Components:
    - server.py: Main MCP server class with stdio transport
    - tools.py: 3 MCP tools (search, song lyrics, artist songs)
    - resources.py: 3 MCP resource templates (song, song lyrics, artist)
    - prompts.py: 1 MCP prompt for searching Genius
    - config.py: Environment-based configuration
    - logger.py: Logging setup
    - utils.py: Error handling and utility functions
"""

__version__ = "0.1.0"
