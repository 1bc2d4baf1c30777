"""Test suite for the Genius MCP Server.

This test package validates the client and server with:
    - Client tests: request building, status checks and error mapping (httpx.MockTransport)
    - Scraper tests: lyrics extraction from song page HTML
    - Transform tests: normalization and structured/narrative rendering
    - Contract tests: tools, resources and prompts
    - Error handling tests: error results and re-raised resource errors

All tests use mocked clients or transports to avoid network access.
"""
