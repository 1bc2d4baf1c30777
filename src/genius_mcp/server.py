"""Main MCP Server class with stdio transport for Claude Desktop integration.

This module implements the MCPServer class that coordinates all MCP components
(tools, resources, prompts) and provides stdio transport for Claude Desktop.
"""

import asyncio
import logging
from typing import Any, Iterable, Optional

import httpx
import mcp.server.stdio
import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents

from genius.client import GeniusClient
from genius.scraper import LyricsScraper

from . import __version__
from .config import ServerConfig
from .logger import setup_logging
from .prompts import PromptRegistry
from .resources import ResourceRegistry
from .tools import ToolRegistry

logger = logging.getLogger(__name__)


class MCPServer:
    """Main MCP server class coordinating tools, resources, and prompts.

    This class:
    - Builds GeniusClient and LyricsScraper from ServerConfig
    - Registers 3 tools, 3 resource templates, and 1 prompt
    - Provides stdio transport for Claude Desktop
    - Handles all MCP protocol methods
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize MCP server with Genius client and registries.

        Args:
            config: Server configuration (default: read from environment)
            transport: Optional httpx transport shared by client and scraper (used by tests)
        """
        self.config = config or ServerConfig.from_environment()

        if not self.config.access_token:
            logger.warning(
                "GENIUS_ACCESS_TOKEN is not set; every Genius API call will fail with an authentication error"
            )

        genius_config = self.config.to_genius_config()
        self.genius_client = GeniusClient(genius_config, transport=transport)
        self.scraper = LyricsScraper(genius_config, transport=transport)

        # Initialize registries
        output_format = self.config.output_format
        self.tool_registry = ToolRegistry(self.genius_client, self.scraper, output_format)
        self.resource_registry = ResourceRegistry(self.genius_client, self.scraper, output_format)
        self.prompt_registry = PromptRegistry()

        # Create MCP server instance
        self.server = Server("genius-mcp-server", version=__version__)

        # Register handlers
        self._register_handlers()

        logger.info(f"Genius MCP Server initialized (output format: {output_format})")

    def _register_handlers(self):
        """Register all MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            tools = self.tool_registry.get_all()
            logger.info(f"Listing {len(tools)} tools")
            return tools

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
            logger.info(f"Executing tool: {name} with args: {arguments}")
            return await self.tool_registry.call(name, arguments)

        @self.server.list_resources()
        async def list_resources() -> list[types.Resource]:
            return self.resource_registry.get_all()

        @self.server.list_resource_templates()
        async def list_resource_templates() -> list[types.ResourceTemplate]:
            templates = self.resource_registry.get_templates()
            logger.info(f"Listing {len(templates)} resource templates")
            return templates

        @self.server.read_resource()
        async def read_resource(uri) -> Iterable[ReadResourceContents]:
            return await self.resource_registry.read(str(uri))

        @self.server.list_prompts()
        async def list_prompts() -> list[types.Prompt]:
            prompts = self.prompt_registry.get_all()
            logger.info(f"Listing {len(prompts)} prompts")
            return prompts

        @self.server.get_prompt()
        async def get_prompt(
            name: str, arguments: dict[str, str] | None
        ) -> types.GetPromptResult:
            logger.info(f"Getting prompt: {name} with args: {arguments}")

            result = await self.prompt_registry.get_prompt(name, arguments or {})

            messages = [
                types.PromptMessage(
                    role=msg["role"],
                    content=types.TextContent(type="text", text=msg["content"]["text"]),
                )
                for msg in result["messages"]
            ]

            return types.GetPromptResult(description=result["description"], messages=messages)

    async def aclose(self):
        """Close the HTTP clients."""
        await self.genius_client.aclose()
        await self.scraper.aclose()

    async def run(self):
        """Run the MCP server with stdio transport."""
        logger.info("Starting Genius MCP Server with stdio transport")

        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.aclose()


async def main():
    """Main entry point for the MCP server."""
    setup_logging()

    server = MCPServer()
    await server.run()


def cli():
    """Console script entry point (``genius-mcp``)."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
