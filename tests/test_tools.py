"""Contract tests for the 3 MCP tools.

These tests validate tool payloads and argument handling with a mocked
GeniusClient and LyricsScraper.
"""

import json

import pytest
from genius.transform import parse_search_hit
from genius_mcp.tools import ToolRegistry


# genius-search-song success scenario
@pytest.mark.asyncio
async def test_search_song_success(mock_genius_client, raw_hits):
    """Test genius-search-song returns hits rendered by type."""
    mock_genius_client.search.return_value = [parse_search_hit(hit) for hit in raw_hits]

    result = await ToolRegistry.execute(
        "genius-search-song",
        {"q": "chandelier"},
        mock_genius_client
    )

    mock_genius_client.search.assert_awaited_once_with("chandelier")
    assert result["query"] == "chandelier"
    assert result["count"] == 4
    assert [r["type"] for r in result["results"]] == ["song", "artist", "web_page", "video"]
    assert result["results"][3] == {"type": "video", "id": 777}


# genius-search-song no results
@pytest.mark.asyncio
async def test_search_song_no_results(mock_genius_client):
    """Test genius-search-song reports an empty search."""
    mock_genius_client.search.return_value = []

    result = await ToolRegistry.execute(
        "genius-search-song",
        {"q": "qwertyuiop"},
        mock_genius_client
    )

    assert result["results"] == []
    assert result["message"] == 'No results found in Genius for "qwertyuiop".'


# genius-search-song default query
@pytest.mark.asyncio
async def test_search_song_default_query(mock_genius_client):
    """Test genius-search-song falls back to the default query."""
    mock_genius_client.search.return_value = []

    await ToolRegistry.execute("genius-search-song", {}, mock_genius_client)

    mock_genius_client.search.assert_awaited_once_with("All my life")


@pytest.mark.asyncio
async def test_search_song_empty_query_sent_as_given(mock_genius_client, mock_scraper):
    """Test an explicit empty query is not replaced by the default."""
    mock_genius_client.search.return_value = []
    registry = ToolRegistry(mock_genius_client, mock_scraper)

    result = await registry.call("genius-search-song", {"q": ""})

    mock_genius_client.search.assert_awaited_once_with("")
    payload = json.loads(result.content[0].text)
    assert payload["query"] == ""


@pytest.mark.asyncio
async def test_search_song_rejects_non_string_query(mock_genius_client):
    with pytest.raises(ValueError, match="q must be a string"):
        await ToolRegistry.execute("genius-search-song", {"q": None}, mock_genius_client)

    mock_genius_client.search.assert_not_awaited()


@pytest.mark.asyncio
async def test_search_song_text_output(mock_genius_client, raw_hits):
    """Test genius-search-song narrative output."""
    mock_genius_client.search.return_value = [parse_search_hit(raw_hits[0])]

    result = await ToolRegistry.execute(
        "genius-search-song",
        {"q": "chandelier"},
        mock_genius_client,
        output_format="text"
    )

    assert isinstance(result, str)
    assert result.startswith('Search results for "chandelier" (1):')
    assert "1. [song] Chandelier by Sia (ID: 378195)" in result


# genius-song-lyrics success scenario
@pytest.mark.asyncio
async def test_song_lyrics_success(mock_genius_client, mock_scraper, sample_song):
    """Test genius-song-lyrics merges song details and scraped lyrics."""
    mock_genius_client.get_song.return_value = sample_song

    result = await ToolRegistry.execute(
        "genius-song-lyrics",
        {"song_id": 378195},
        mock_genius_client,
        mock_scraper
    )

    mock_genius_client.get_song.assert_awaited_once_with(378195)
    mock_scraper.scrape.assert_awaited_once_with("https://genius.com/Sia-chandelier-lyrics")
    assert result["id"] == 378195
    assert result["lyrics"] == "[Verse 1]\nFirst line\n"
    assert result["producers"][0]["name"] == "Greg Kurstin"
    assert [s["id"] for s in result["samples"]] == [1, 2, 3]


# genius-song-lyrics page without lyrics
@pytest.mark.asyncio
async def test_song_lyrics_without_lyrics(mock_genius_client, mock_scraper, sample_song):
    """Test genius-song-lyrics keeps the lyrics key when none were found."""
    mock_genius_client.get_song.return_value = sample_song
    mock_scraper.scrape.return_value = None

    result = await ToolRegistry.execute(
        "genius-song-lyrics",
        {"song_id": 378195},
        mock_genius_client,
        mock_scraper
    )

    assert "lyrics" in result
    assert result["lyrics"] is None


@pytest.mark.asyncio
async def test_song_lyrics_text_output(mock_genius_client, mock_scraper, sample_song):
    """Test genius-song-lyrics narrative output ends with the lyrics section."""
    mock_genius_client.get_song.return_value = sample_song

    result = await ToolRegistry.execute(
        "genius-song-lyrics",
        {"song_id": 378195},
        mock_genius_client,
        mock_scraper,
        output_format="text"
    )

    assert "Full Title: Chandelier by Sia" in result
    assert result.endswith("Lyrics:\n[Verse 1]\nFirst line\n")


@pytest.mark.asyncio
async def test_song_lyrics_default_song_id(mock_genius_client, mock_scraper, sample_song):
    mock_genius_client.get_song.return_value = sample_song

    await ToolRegistry.execute("genius-song-lyrics", {}, mock_genius_client, mock_scraper)

    mock_genius_client.get_song.assert_awaited_once_with(378195)


# genius-list-artist-songs success scenario
@pytest.mark.asyncio
async def test_list_artist_songs_success(mock_genius_client, sample_artist_songs):
    """Test genius-list-artist-songs forwards pagination and echoes it."""
    mock_genius_client.get_artist_songs.return_value = sample_artist_songs

    result = await ToolRegistry.execute(
        "genius-list-artist-songs",
        {"artist_id": 16775, "sort": "popularity", "page": 2, "per_page": 10},
        mock_genius_client
    )

    mock_genius_client.get_artist_songs.assert_awaited_once_with(
        16775, sort="popularity", page=2, per_page=10
    )
    assert result["artist_id"] == 16775
    assert result["count"] == 2
    assert result["sort"] == "popularity"
    assert result["page"] == 2
    assert result["per_page"] == 10
    assert result["songs"][0]["full_title"] == "Chandelier by Sia"


@pytest.mark.asyncio
async def test_list_artist_songs_defaults(mock_genius_client):
    """Test genius-list-artist-songs omits unset pagination."""
    mock_genius_client.get_artist_songs.return_value = []

    result = await ToolRegistry.execute("genius-list-artist-songs", {}, mock_genius_client)

    mock_genius_client.get_artist_songs.assert_awaited_once_with(
        21964, sort=None, page=None, per_page=None
    )
    assert result["songs"] == []
    assert "No songs found for artist with ID 21964" in result["message"]


# genius-list-artist-songs parameter validation
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arguments",
    [
        {"artist_id": 1, "per_page": 51},
        {"artist_id": 1, "per_page": 0},
        {"artist_id": 1, "page": 0},
        {"artist_id": 1, "sort": "release_date"},
        {"artist_id": "abc"},
        {"artist_id": True},
    ],
)
async def test_list_artist_songs_invalid_arguments(mock_genius_client, arguments):
    """Test genius-list-artist-songs rejects out-of-range arguments before calling Genius."""
    with pytest.raises(ValueError):
        await ToolRegistry.execute("genius-list-artist-songs", arguments, mock_genius_client)

    mock_genius_client.get_artist_songs.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_tool(mock_genius_client):
    with pytest.raises(ValueError, match="Unknown tool"):
        await ToolRegistry.execute("genius-unknown", {}, mock_genius_client)


def test_tool_schemas(mock_genius_client, mock_scraper):
    """Verify the published input schemas carry defaults and bounds."""
    registry = ToolRegistry(mock_genius_client, mock_scraper)
    tools = {tool.name: tool for tool in registry.get_all()}

    assert tools["genius-search-song"].inputSchema["properties"]["q"]["default"] == "All my life"
    assert tools["genius-song-lyrics"].inputSchema["properties"]["song_id"]["default"] == 378195

    artist_props = tools["genius-list-artist-songs"].inputSchema["properties"]
    assert artist_props["artist_id"]["default"] == 21964
    assert artist_props["sort"]["enum"] == ["title", "popularity"]
    assert artist_props["page"]["minimum"] == 1
    assert artist_props["per_page"]["maximum"] == 50


@pytest.mark.asyncio
async def test_call_wraps_payload_as_json(mock_genius_client, mock_scraper):
    """Verify ToolRegistry.call returns a CallToolResult with JSON text."""
    mock_genius_client.search.return_value = []
    registry = ToolRegistry(mock_genius_client, mock_scraper)

    result = await registry.call("genius-search-song", {"q": "x"})

    assert result.isError is False
    payload = json.loads(result.content[0].text)
    assert payload["query"] == "x"
