"""Test configuration and shared fixtures for the Genius MCP Server tests.

This module provides pytest fixtures for mocking GeniusClient/LyricsScraper,
raw Genius API payloads, and a helper for building httpx mock transports.
All tests run without network access.
"""

import json
from typing import Callable, Dict

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from genius.models import GeniusConfig
from genius.transform import parse_artist, parse_song, parse_song_summary


LYRICS_PAGE_HTML = """
<html>
  <body>
    <div id="lyrics-root">
      <div class="Lyrics__Container-sc-1ynbvzw-1 kUgSbL">
        <div class="LyricsHeader__Container-sc-5e5b-1">Song Lyrics<button>Translations</button></div>
        [Verse 1]<br/>First line<br/>Second line<br/>
      </div>
      <div class="RightSidebar__Container-sc-1">Advertisement</div>
      <div class="Lyrics__Container-sc-1ynbvzw-1 kUgSbL">
        <div class="LyricsHeader__Title-sc-5e5b-2">Section</div>
        [Chorus]<br/>Third line
      </div>
    </div>
  </body>
</html>
"""


def genius_envelope(response: Dict, status: int = 200) -> Dict:
    """Wrap a payload the way the Genius API does."""
    return {"meta": {"status": status}, "response": response}


@pytest.fixture
def genius_config():
    """Return a GeniusConfig pointing at the real API origin with a fake token."""
    return GeniusConfig(access_token="test-token")


@pytest.fixture
def mock_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]:
    """Factory for httpx.MockTransport that records every request.

    Returns:
        Callable taking a handler and returning a transport with a ``requests`` list
    """

    def factory(handler):
        requests = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording_handler)
        transport.requests = requests
        return transport

    return factory


@pytest.fixture
def json_response():
    """Build an httpx.Response carrying a JSON body."""

    def build(body, status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=json.dumps(body).encode(),
            headers={"content-type": "application/json"},
        )

    return build


@pytest.fixture
def raw_song():
    """Raw ``response.song`` payload with every optional field present."""
    return {
        "id": 378195,
        "title": "Sia - Chandelier",
        "artist_names": "Sia",
        "full_title": "Chandelier by Sia",
        "url": "https://genius.com/Sia-chandelier-lyrics",
        "release_date_for_display": "March 17, 2014",
        "lyrics_state": "complete",
        "primary_artist": {
            "id": 16775,
            "name": "Sia",
            "url": "https://genius.com/artists/Sia",
        },
        "album": {
            "name": "1000 Forms of Fear",
            "artist_names": "Sia",
            "url": "https://genius.com/albums/Sia/1000-forms-of-fear",
        },
        "stats": {"pageviews": 4200000},
        "producer_artists": [
            {"name": "Greg Kurstin", "url": "https://genius.com/artists/Greg-kurstin"},
            {"name": "Jesse Shatkin", "url": "https://genius.com/artists/Jesse-shatkin"},
        ],
        "writer_artists": [
            {"name": "Sia", "url": "https://genius.com/artists/Sia"},
        ],
        "song_relationships": [
            {
                "type": "samples",
                "songs": [
                    {"id": 1, "title": "First Sample", "artist_names": "Artist A", "url": "https://genius.com/a"},
                    {"id": 2, "title": "Second Sample", "artist_names": "Artist B", "url": "https://genius.com/b"},
                ],
            },
            {
                "type": "sampled_in",
                "songs": [
                    {"id": 99, "title": "Not A Sample", "artist_names": "Artist Z", "url": "https://genius.com/z"},
                ],
            },
            {
                "type": "samples",
                "songs": [
                    {"id": 3, "title": "Third Sample", "artist_names": "Artist C"},
                ],
            },
        ],
    }


@pytest.fixture
def minimal_raw_song():
    """Raw song payload with only required fields."""
    return {
        "id": 42,
        "title": "Untitled",
        "artist_names": "Nobody",
        "full_title": "Untitled by Nobody",
        "url": "https://genius.com/Nobody-untitled-lyrics",
        "lyrics_state": "unreleased",
        "primary_artist": {"id": 7, "name": "Nobody", "url": "https://genius.com/artists/Nobody"},
    }


@pytest.fixture
def raw_artist():
    """Raw ``response.artist`` payload."""
    return {
        "id": 16775,
        "name": "Sia",
        "url": "https://genius.com/artists/Sia",
        "description": {
            "plain": "Sia Furler is an Australian singer-songwriter.",
            "html": "<p>Sia Furler is an Australian singer-songwriter.</p>",
        },
    }


@pytest.fixture
def raw_hits():
    """Raw ``response.hits`` covering every hit type."""
    return [
        {
            "type": "song",
            "index": "song",
            "result": {
                "id": 378195,
                "title": "Chandelier",
                "artist_names": "Sia",
                "url": "https://genius.com/Sia-chandelier-lyrics",
                "primary_artist": {"id": 16775, "name": "Sia", "url": "https://genius.com/artists/Sia"},
            },
        },
        {
            "type": "artist",
            "index": "artist",
            "result": {"id": 16775, "name": "Sia", "url": "https://genius.com/artists/Sia"},
        },
        {
            "type": "web_page",
            "index": "web_page",
            "result": {"id": 555, "url": "https://example.com/chandelier"},
        },
        {
            "type": "video",
            "index": "video",
            "result": {"id": 777, "title": "Chandelier (Official Video)", "url": "https://example.com/v"},
        },
    ]


@pytest.fixture
def raw_artist_songs():
    """Raw ``response.songs`` of an artist listing."""
    return [
        {
            "id": 378195,
            "title": "Chandelier",
            "artist_names": "Sia",
            "full_title": "Chandelier by Sia",
            "url": "https://genius.com/Sia-chandelier-lyrics",
            "release_date_for_display": "March 17, 2014",
            "lyrics_state": "complete",
        },
        {
            "id": 2339,
            "title": "Breathe Me",
            "artist_names": "Sia",
            "full_title": "Breathe Me by Sia",
            "url": "https://genius.com/Sia-breathe-me-lyrics",
            "lyrics_state": "complete",
        },
    ]


@pytest.fixture
def sample_song(raw_song):
    return parse_song(raw_song)


@pytest.fixture
def sample_artist(raw_artist):
    return parse_artist(raw_artist)


@pytest.fixture
def sample_artist_songs(raw_artist_songs):
    return [parse_song_summary(song) for song in raw_artist_songs]


@pytest.fixture
def mock_genius_client():
    """Create a mocked GeniusClient for testing.

    Returns:
        MagicMock: Mocked GeniusClient with async methods
    """
    client = MagicMock()

    client.search = AsyncMock()
    client.get_song = AsyncMock()
    client.get_artist = AsyncMock()
    client.get_artist_songs = AsyncMock()

    return client


@pytest.fixture
def mock_scraper():
    """Create a mocked LyricsScraper returning fixed lyrics."""
    scraper = MagicMock()
    scraper.scrape = AsyncMock(return_value="[Verse 1]\nFirst line\n")
    return scraper
