"""MCP Resources Registry - 3 resource templates for songs and artists.

This module implements the ResourceRegistry class that exposes Genius songs,
songs with lyrics and artists as addressable read-only resources.
"""

import logging
import re
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel.helper_types import ReadResourceContents

from genius import transform
from genius.client import GeniusClient
from genius.scraper import LyricsScraper

from .utils import ResourceReadError, to_json

logger = logging.getLogger(__name__)

SONG_URI = re.compile(r"^genius://songs/(?P<id>[^/]+)$")
SONG_LYRICS_URI = re.compile(r"^genius://songs/(?P<id>[^/]+)/lyrics$")
ARTIST_URI = re.compile(r"^genius://artists/(?P<id>[^/]+)$")


def _parse_id(raw_id: str, kind: str) -> int:
    """Convert the ``{id}`` URI segment to an integer.

    Raises:
        ResourceReadError: If the segment is not a positive integer
    """
    if not raw_id.isdigit():
        raise ResourceReadError(f"Invalid {kind} ID: {raw_id}")
    return int(raw_id)


class ResourceRegistry:
    """Registry for all 3 MCP resource templates.

    Provides:
        1. genius://songs/{id} - Song details
        2. genius://songs/{id}/lyrics - Song details with scraped lyrics
        3. genius://artists/{id} - Artist details
    """

    def __init__(
        self,
        genius_client: GeniusClient,
        scraper: LyricsScraper,
        output_format: str = "json",
    ):
        """Initialize resource registry.

        Args:
            genius_client: Configured GeniusClient instance
            scraper: LyricsScraper for song pages
            output_format: "json" for structured documents, "text" for narrative ones
        """
        self.client = genius_client
        self.scraper = scraper
        self.output_format = output_format
        self.templates = self._define_templates()

    @property
    def mime_type(self) -> str:
        return "text/plain" if self.output_format == "text" else "application/json"

    def _define_templates(self) -> Dict[str, types.ResourceTemplate]:
        return {
            "genius-song": types.ResourceTemplate(
                uriTemplate="genius://songs/{id}",
                name="genius-song",
                description="Song details from Genius (credits, album, samples)",
                mimeType=self.mime_type,
            ),
            "genius-song-lyrics": types.ResourceTemplate(
                uriTemplate="genius://songs/{id}/lyrics",
                name="genius-song-lyrics",
                description="Song details from Genius including lyrics scraped from the song page",
                mimeType=self.mime_type,
            ),
            "genius-artist": types.ResourceTemplate(
                uriTemplate="genius://artists/{id}",
                name="genius-artist",
                description="Artist details from Genius including the description",
                mimeType=self.mime_type,
            ),
        }

    def get_all(self) -> List[types.Resource]:
        """Concrete resources: none, everything is addressed through templates."""
        return []

    def get_templates(self) -> List[types.ResourceTemplate]:
        """Get all resource template definitions.

        Returns:
            List of all 3 ResourceTemplate objects
        """
        return list(self.templates.values())

    async def read(self, uri: str) -> List[ReadResourceContents]:
        """Read a resource by URI.

        Args:
            uri: Resource URI (e.g., "genius://songs/378195/lyrics")

        Returns:
            Single-element list with the rendered document

        Raises:
            ValueError: If the URI matches no template
            ResourceReadError: If the id is invalid or the upstream call fails
        """
        uri = str(uri)
        logger.info(f"Reading resource: {uri}")

        routes = [
            (SONG_LYRICS_URI, "song", lambda i: self._read_song(i, include_lyrics=True)),
            (SONG_URI, "song", self._read_song),
            (ARTIST_URI, "artist", self._read_artist),
        ]

        for pattern, kind, handler in routes:
            match = pattern.match(uri)
            if match:
                content = await handler(_parse_id(match.group("id"), kind))
                return [ReadResourceContents(content=content, mime_type=self.mime_type)]

        raise ValueError(f"Unknown resource URI: {uri}")

    @staticmethod
    async def read_resource(
        uri: str,
        client: GeniusClient,
        scraper: Optional[LyricsScraper] = None,
        output_format: str = "json",
    ) -> Dict[str, Any]:
        """Read a resource by URI (used in tests).

        Returns:
            Resource read result with uri, mimeType and text contents
        """
        registry = ResourceRegistry(client, scraper, output_format)
        contents = await registry.read(uri)

        return {
            "uri": uri,
            "mimeType": registry.mime_type,
            "contents": [item.content for item in contents],
        }

    # Resource handler methods (private)

    async def _read_song(self, song_id: int, include_lyrics: bool = False) -> str:
        """Read genius://songs/{id} or genius://songs/{id}/lyrics."""
        resource = f"genius://songs/{song_id}" + ("/lyrics" if include_lyrics else "")
        try:
            song = await self.client.get_song(song_id)
            lyrics = None
            if include_lyrics and song.url:
                lyrics = await self.scraper.scrape(song.url)
        except Exception as e:
            logger.error(f"Error reading the song resource {resource}: {e}")
            raise ResourceReadError(f"Could not read the song resource {song_id}: {e}") from e

        if self.output_format == "text":
            return transform.song_to_text(song, lyrics=lyrics, include_lyrics=include_lyrics)
        return to_json(transform.song_to_dict(song, lyrics=lyrics, include_lyrics=include_lyrics))

    async def _read_artist(self, artist_id: int) -> str:
        """Read genius://artists/{id}."""
        try:
            artist = await self.client.get_artist(artist_id)
        except Exception as e:
            logger.error(f"Error reading the artist resource genius://artists/{artist_id}: {e}")
            raise ResourceReadError(f"Could not read the artist resource {artist_id}: {e}") from e

        if self.output_format == "text":
            return transform.artist_to_text(artist)
        return to_json(transform.artist_to_dict(artist))
