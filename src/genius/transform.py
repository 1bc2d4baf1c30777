"""Normalize raw Genius API payloads and render them for MCP clients.

Raw JSON is first parsed into the records from ``models`` and then rendered
in one of two shapes: structured (JSON-serializable dicts) or narrative
(labeled plain text). Both renderers read the same record, so the two shapes
never disagree on content.

None of these functions raise on missing optional data.
"""

from typing import Any, Dict, List, Optional, Sequence

from .models import (
    Album,
    ArtistDescription,
    ArtistDetails,
    ArtistRef,
    Credit,
    SampledSong,
    SearchHit,
    SongDetails,
    SongStats,
    SongSummary,
)


SAMPLES_RELATIONSHIP = "samples"

# Narrative fallback tokens
UNKNOWN = "Unknown"
NONE = "None"
NO_PRODUCERS = "No producers listed"
NO_WRITERS = "No writers listed"
NO_DESCRIPTION = "No description available"
NO_LYRICS = "No lyrics available"


def _field(data: Any, key: str) -> Any:
    """Return ``data[key]`` if data is a dict, else None."""
    if isinstance(data, dict):
        return data.get(key)
    return None


def _items(data: Any, key: str) -> List[Any]:
    """Return ``data[key]`` as a list (empty when missing or not a list)."""
    value = _field(data, key)
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    """Render a scalar for narrative output.

    Examples:
        >>> _text(None)
        'Unknown'
        >>> _text(1200)
        '1200'
    """
    if value is None or value == "":
        return UNKNOWN
    return str(value)


# Parsing: raw JSON -> records


def parse_artist_ref(data: Any) -> Optional[ArtistRef]:
    if not isinstance(data, dict):
        return None
    return ArtistRef(id=data.get("id"), name=data.get("name"), url=data.get("url"))


def parse_search_hit(hit: Any) -> SearchHit:
    """Parse one element of ``response.hits``.

    Args:
        hit: Raw hit with ``type`` and ``result`` keys

    Returns:
        SearchHit keyed by the hit's discriminant
    """
    result = _field(hit, "result")
    return SearchHit(
        type=_field(hit, "type") or "unknown",
        id=_field(result, "id"),
        title=_field(result, "title"),
        name=_field(result, "name"),
        artist_names=_field(result, "artist_names"),
        url=_field(result, "url"),
        primary_artist=parse_artist_ref(_field(result, "primary_artist")),
    )


def parse_samples(relationships: Any) -> List[SampledSong]:
    """Flatten the songs of every "samples" relationship.

    Relationships of any other type are ignored. Output order follows the
    order of relationships and of songs within each relationship.

    Args:
        relationships: Raw ``song_relationships`` list (may be None)

    Returns:
        List of SampledSong records

    Examples:
        >>> rels = [
        ...     {"type": "sampled_in", "songs": [{"id": 1}]},
        ...     {"type": "samples", "songs": [{"id": 2}, {"id": 3}]},
        ... ]
        >>> [s.id for s in parse_samples(rels)]
        [2, 3]
        >>> parse_samples(None)
        []
    """
    if not isinstance(relationships, list):
        return []

    samples = []
    for relationship in relationships:
        if _field(relationship, "type") != SAMPLES_RELATIONSHIP:
            continue
        for song in _items(relationship, "songs"):
            samples.append(
                SampledSong(
                    id=_field(song, "id"),
                    title=_field(song, "title"),
                    artist_names=_field(song, "artist_names"),
                    url=_field(song, "url"),
                )
            )
    return samples


def _parse_credits(artists: Any) -> List[Credit]:
    if not isinstance(artists, list):
        return []
    return [Credit(name=_field(a, "name"), url=_field(a, "url")) for a in artists]


def parse_song(data: Any) -> SongDetails:
    """Parse ``response.song`` into SongDetails.

    Missing album/stats become None; missing producer, writer or relationship
    lists become empty lists.
    """
    album = _field(data, "album")
    stats = _field(data, "stats")
    return SongDetails(
        id=_field(data, "id"),
        title=_field(data, "title"),
        artist_names=_field(data, "artist_names"),
        full_title=_field(data, "full_title"),
        url=_field(data, "url"),
        release_date=_field(data, "release_date_for_display"),
        lyrics_state=_field(data, "lyrics_state"),
        primary_artist=parse_artist_ref(_field(data, "primary_artist")),
        album=Album(
            name=album.get("name"),
            artist_names=album.get("artist_names"),
            url=album.get("url"),
        )
        if isinstance(album, dict)
        else None,
        stats=SongStats(pageviews=stats.get("pageviews")) if isinstance(stats, dict) else None,
        producers=_parse_credits(_field(data, "producer_artists")),
        writers=_parse_credits(_field(data, "writer_artists")),
        samples=parse_samples(_field(data, "song_relationships")),
    )


def parse_song_summary(data: Any) -> SongSummary:
    """Parse one element of ``response.songs`` from an artist listing."""
    return SongSummary(
        id=_field(data, "id"),
        title=_field(data, "title"),
        artist_names=_field(data, "artist_names"),
        full_title=_field(data, "full_title"),
        url=_field(data, "url"),
        release_date=_field(data, "release_date_for_display"),
        lyrics_state=_field(data, "lyrics_state"),
    )


def parse_artist(data: Any) -> ArtistDetails:
    """Parse ``response.artist``. Empty description fields become None."""
    description = _field(data, "description")
    return ArtistDetails(
        id=_field(data, "id"),
        name=_field(data, "name"),
        url=_field(data, "url"),
        description=ArtistDescription(
            plain=_field(description, "plain") or None,
            html=_field(description, "html") or None,
        ),
    )


# Structured rendering


def _artist_ref_to_dict(artist: Optional[ArtistRef]) -> Optional[Dict[str, Any]]:
    if artist is None:
        return None
    return {"id": artist.id, "name": artist.name, "url": artist.url}


def search_hit_to_dict(hit: SearchHit) -> Dict[str, Any]:
    """Render a search hit according to its type.

    Unrecognized types keep only ``type`` and ``id``.
    """
    if hit.type == "song":
        return {
            "type": "song",
            "id": hit.id,
            "title": hit.title,
            "artist_names": hit.artist_names,
            "url": hit.url,
            "primary_artist": _artist_ref_to_dict(hit.primary_artist),
        }
    if hit.type == "artist":
        return {"type": "artist", "id": hit.id, "name": hit.name, "url": hit.url}
    if hit.type == "web_page":
        return {
            "type": "web_page",
            "id": hit.id,
            "title": hit.title or hit.url,
            "url": hit.url,
        }
    return {"type": hit.type, "id": hit.id}


def song_to_dict(
    song: SongDetails, lyrics: Optional[str] = None, include_lyrics: bool = False
) -> Dict[str, Any]:
    """Render song details as a JSON-serializable dict.

    Args:
        song: Parsed song
        lyrics: Scraped lyrics, if any
        include_lyrics: Add a ``lyrics`` key (null when lyrics is None)

    Returns:
        Structured song payload
    """
    result = {
        "id": song.id,
        "title": song.title,
        "artist_names": song.artist_names,
        "full_title": song.full_title,
        "url": song.url,
        "release_date": song.release_date,
        "lyrics_state": song.lyrics_state,
        "primary_artist": _artist_ref_to_dict(song.primary_artist),
        "album": {
            "name": song.album.name,
            "artist_names": song.album.artist_names,
            "url": song.album.url,
        }
        if song.album
        else None,
        "stats": {"pageviews": song.stats.pageviews} if song.stats else None,
        "producers": [{"name": c.name, "url": c.url} for c in song.producers],
        "writers": [{"name": c.name, "url": c.url} for c in song.writers],
        "samples": [
            {"id": s.id, "title": s.title, "artist_names": s.artist_names, "url": s.url}
            for s in song.samples
        ],
    }
    if include_lyrics:
        result["lyrics"] = lyrics or None
    return result


def song_summary_to_dict(song: SongSummary) -> Dict[str, Any]:
    return {
        "id": song.id,
        "title": song.title,
        "artist_names": song.artist_names,
        "url": song.url,
        "full_title": song.full_title,
        "release_date": song.release_date,
        "lyrics_state": song.lyrics_state,
    }


def artist_to_dict(artist: ArtistDetails) -> Dict[str, Any]:
    return {
        "id": artist.id,
        "name": artist.name,
        "url": artist.url,
        "description": {
            "plain": artist.description.plain,
            "html": artist.description.html,
        },
    }


def no_results_message(query: str) -> str:
    return f'No results found in Genius for "{query}".'


def no_songs_message(artist_id: int) -> str:
    return f"No songs found for artist with ID {artist_id} (or the ID is invalid)."


def search_results_to_dict(query: str, hits: Sequence[SearchHit]) -> Dict[str, Any]:
    if not hits:
        return {"query": query, "results": [], "message": no_results_message(query)}
    results = [search_hit_to_dict(hit) for hit in hits]
    return {"query": query, "results": results, "count": len(results)}


def artist_songs_to_dict(
    artist_id: int,
    songs: Sequence[SongSummary],
    sort: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> Dict[str, Any]:
    if not songs:
        return {"artist_id": artist_id, "songs": [], "message": no_songs_message(artist_id)}
    formatted = [song_summary_to_dict(song) for song in songs]
    return {
        "artist_id": artist_id,
        "songs": formatted,
        "count": len(formatted),
        "sort": sort,
        "page": page,
        "per_page": per_page,
    }


# Narrative rendering


def search_hit_to_text(hit: SearchHit) -> str:
    """Render a search hit as a single line."""
    if hit.type == "song":
        artist = hit.artist_names or (hit.primary_artist.name if hit.primary_artist else None)
        return f"[song] {_text(hit.title)} by {_text(artist)} (ID: {_text(hit.id)}) - {_text(hit.url)}"
    if hit.type == "artist":
        return f"[artist] {_text(hit.name)} (ID: {_text(hit.id)}) - {_text(hit.url)}"
    if hit.type == "web_page":
        return f"[web_page] {_text(hit.title or hit.url)} (ID: {_text(hit.id)}) - {_text(hit.url)}"
    return f"[{hit.type}] (ID: {_text(hit.id)})"


def _credits_text(credits: Sequence[Credit], fallback: str) -> str:
    names = [c.name for c in credits if c.name]
    return ", ".join(names) if names else fallback


def song_to_text(
    song: SongDetails, lyrics: Optional[str] = None, include_lyrics: bool = False
) -> str:
    """Render song details as a labeled text block.

    Args:
        song: Parsed song
        lyrics: Scraped lyrics, if any
        include_lyrics: Append a lyrics section

    Returns:
        Multi-line description of the song
    """
    if song.album and song.album.name:
        album = song.album.name
        if song.album.artist_names:
            album = f"{album} by {song.album.artist_names}"
    else:
        album = NONE

    samples = [
        f"{_text(s.title)} by {_text(s.artist_names)}" for s in song.samples
    ]

    lines = [
        f"Title: {_text(song.title)}",
        f"Full Title: {_text(song.full_title)}",
        f"Artists: {_text(song.artist_names)}",
        f"Primary Artist: {_text(song.primary_artist.name if song.primary_artist else None)}",
        f"Album: {album}",
        f"Release Date: {_text(song.release_date)}",
        f"Lyrics State: {_text(song.lyrics_state)}",
        f"Pageviews: {_text(song.stats.pageviews if song.stats else None)}",
        f"Producers: {_credits_text(song.producers, NO_PRODUCERS)}",
        f"Writers: {_credits_text(song.writers, NO_WRITERS)}",
        f"Samples: {', '.join(samples) if samples else NONE}",
        f"ID: {_text(song.id)}",
        f"URL: {_text(song.url)}",
    ]
    text = "\n".join(lines)
    if include_lyrics:
        text += f"\n\nLyrics:\n{lyrics or NO_LYRICS}"
    return text


def song_summary_to_text(song: SongSummary) -> str:
    title = song.full_title or song.title
    return (
        f"{_text(title)} (ID: {_text(song.id)}) - "
        f"Released: {_text(song.release_date)} - {_text(song.url)}"
    )


def artist_to_text(artist: ArtistDetails) -> str:
    lines = [
        f"Name: {_text(artist.name)}",
        f"ID: {_text(artist.id)}",
        f"URL: {_text(artist.url)}",
        f"Description: {artist.description.plain or NO_DESCRIPTION}",
    ]
    return "\n".join(lines)


def search_results_to_text(query: str, hits: Sequence[SearchHit]) -> str:
    if not hits:
        return no_results_message(query)
    lines = [f'Search results for "{query}" ({len(hits)}):']
    lines.extend(f"{i}. {search_hit_to_text(hit)}" for i, hit in enumerate(hits, 1))
    return "\n".join(lines)


def artist_songs_to_text(
    artist_id: int,
    songs: Sequence[SongSummary],
    sort: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> str:
    if not songs:
        return no_songs_message(artist_id)
    lines = [
        f"Songs for artist {artist_id} ({len(songs)}):",
        f"Sort: {sort or NONE} | Page: {_text(page)} | Per Page: {_text(per_page)}",
    ]
    lines.extend(f"{i}. {song_summary_to_text(song)}" for i, song in enumerate(songs, 1))
    return "\n".join(lines)
