"""MCP Tools Registry - 3 tools for Genius search, lyrics and artist songs.

This module implements the ToolRegistry class that exposes 3 MCP tools
backed by GeniusClient and LyricsScraper.
"""

import logging
from typing import Any, Dict, Optional, Union

import mcp.types as types

from genius import transform
from genius.client import GeniusClient
from genius.scraper import LyricsScraper

from .utils import safe_tool_execution

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_QUERY = "All my life"
DEFAULT_SONG_ID = 378195
DEFAULT_ARTIST_ID = 21964
MAX_PER_PAGE = 50
SORT_OPTIONS = ("title", "popularity")


def _int_argument(
    arguments: Dict[str, Any],
    key: str,
    default: Optional[int] = None,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> Optional[int]:
    """Read an integer argument, enforcing bounds.

    Raises:
        ValueError: If the value is not an integer or is out of bounds
    """
    value = arguments.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ValueError(f"{key} must be at least {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{key} must be at most {maximum}, got {value}")
    return value


class ToolRegistry:
    """Registry for all 3 MCP tools with error handling.

    Provides:
        1. genius-search-song - Search songs, artists and web pages
        2. genius-song-lyrics - Song details plus scraped lyrics
        3. genius-list-artist-songs - Paginated song listing of an artist
    """

    def __init__(
        self,
        genius_client: GeniusClient,
        scraper: LyricsScraper,
        output_format: str = "json",
    ):
        """Initialize tool registry.

        Args:
            genius_client: Configured GeniusClient instance
            scraper: LyricsScraper for song pages
            output_format: "json" for structured payloads, "text" for narrative ones
        """
        self.client = genius_client
        self.scraper = scraper
        self.output_format = output_format
        self.tools = self._define_tools()
        self.handlers = {
            "genius-search-song": self._search_song,
            "genius-song-lyrics": self._song_lyrics,
            "genius-list-artist-songs": self._list_artist_songs,
        }

    def _define_tools(self) -> Dict[str, types.Tool]:
        return {
            "genius-search-song": types.Tool(
                name="genius-search-song",
                description="Search for songs or web pages in Genius",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "q": {
                            "type": "string",
                            "description": "The song name to search for",
                            "default": DEFAULT_SEARCH_QUERY,
                        },
                    },
                },
            ),
            "genius-song-lyrics": types.Tool(
                name="genius-song-lyrics",
                description="Get a song's details and lyrics by song id",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "song_id": {
                            "type": "integer",
                            "description": "The numeric ID of the song in Genius.",
                            "default": DEFAULT_SONG_ID,
                        },
                    },
                },
            ),
            "genius-list-artist-songs": types.Tool(
                name="genius-list-artist-songs",
                description="List songs of an artist in Genius by their ID",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "artist_id": {
                            "type": "integer",
                            "description": "The numeric ID of the artist in Genius.",
                            "default": DEFAULT_ARTIST_ID,
                        },
                        "sort": {
                            "type": "string",
                            "enum": list(SORT_OPTIONS),
                            "description": "Sorting criterion: 'title' (alphabetical) or 'popularity'.",
                        },
                        "page": {
                            "type": "integer",
                            "minimum": 1,
                            "description": "Number of page for pagination (starting at 1).",
                        },
                        "per_page": {
                            "type": "integer",
                            "minimum": 1,
                            "maximum": MAX_PER_PAGE,
                            "description": f"Number of results per page (maximum {MAX_PER_PAGE}).",
                        },
                    },
                },
            ),
        }

    def get_all(self) -> list[types.Tool]:
        """Get all tool definitions.

        Returns:
            List of all 3 Tool objects
        """
        return list(self.tools.values())

    async def call(self, tool_name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        """Execute a tool by name, turning failures into an error result.

        Raises:
            ValueError: If tool_name is invalid
        """
        handler = self.handlers.get(tool_name)
        if handler is None:
            raise ValueError(f"Unknown tool: {tool_name}")

        # Fill schema defaults so error messages can name the ids actually used
        properties = self.tools[tool_name].inputSchema.get("properties", {})
        defaults = {
            name: prop["default"] for name, prop in properties.items() if "default" in prop
        }
        arguments = {**defaults, **(arguments or {})}

        return await safe_tool_execution(tool_name, handler, arguments)

    @staticmethod
    async def execute(
        tool_name: str,
        arguments: Dict[str, Any],
        client: GeniusClient,
        scraper: Optional[LyricsScraper] = None,
        output_format: str = "json",
    ) -> Union[str, Dict[str, Any]]:
        """Execute a tool by name without error handling (used in tests).

        Args:
            tool_name: Name of tool to execute
            arguments: Tool arguments
            client: GeniusClient instance
            scraper: LyricsScraper instance (needed for genius-song-lyrics)
            output_format: "json" or "text"

        Returns:
            Tool payload: a dict for "json", a string for "text"

        Raises:
            ValueError: If tool_name is invalid
        """
        registry = ToolRegistry(client, scraper, output_format)

        if tool_name not in registry.handlers:
            raise ValueError(f"Unknown tool: {tool_name}")

        return await registry.handlers[tool_name](arguments)

    # Tool handler methods (private)

    async def _search_song(self, arguments: Dict[str, Any]) -> Union[str, Dict[str, Any]]:
        """Search Genius."""
        q = arguments.get("q", DEFAULT_SEARCH_QUERY)
        if not isinstance(q, str):
            raise ValueError(f"q must be a string, got {q!r}")

        hits = await self.client.search(q)

        if self.output_format == "text":
            return transform.search_results_to_text(q, hits)
        return transform.search_results_to_dict(q, hits)

    async def _song_lyrics(self, arguments: Dict[str, Any]) -> Union[str, Dict[str, Any]]:
        """Get song details with scraped lyrics."""
        song_id = _int_argument(arguments, "song_id", default=DEFAULT_SONG_ID)
        logger.info(f"Reading the song lyrics resource genius://songs/{song_id}/lyrics")

        song = await self.client.get_song(song_id)
        lyrics = await self.scraper.scrape(song.url) if song.url else None

        if self.output_format == "text":
            return transform.song_to_text(song, lyrics=lyrics, include_lyrics=True)
        return transform.song_to_dict(song, lyrics=lyrics, include_lyrics=True)

    async def _list_artist_songs(self, arguments: Dict[str, Any]) -> Union[str, Dict[str, Any]]:
        """List songs of an artist."""
        artist_id = _int_argument(arguments, "artist_id", default=DEFAULT_ARTIST_ID)
        page = _int_argument(arguments, "page", minimum=1)
        per_page = _int_argument(arguments, "per_page", minimum=1, maximum=MAX_PER_PAGE)
        sort = arguments.get("sort")
        if sort is not None and sort not in SORT_OPTIONS:
            raise ValueError(f"sort must be one of {', '.join(SORT_OPTIONS)}, got {sort!r}")

        songs = await self.client.get_artist_songs(
            artist_id, sort=sort, page=page, per_page=per_page
        )

        if self.output_format == "text":
            return transform.artist_songs_to_text(artist_id, songs, sort, page, per_page)
        return transform.artist_songs_to_dict(artist_id, songs, sort, page, per_page)
