"""Data models for Genius API integration."""

from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_API_BASE = "https://api.genius.com"
DEFAULT_USER_AGENT = "Genius-MCP-Server/1.0"


@dataclass
class GeniusConfig:
    """Configuration for talking to the Genius API and song pages.

    Attributes:
        access_token: Bearer token for the API (may be unset; checked per request)
        api_base: API origin (e.g., "https://api.genius.com")
        user_agent: Client identifier sent with every request
        timeout: HTTP timeout in seconds
    """

    access_token: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0

    def __post_init__(self):
        """Validate configuration on initialization."""
        if not self.api_base or not self.api_base.startswith(("http://", "https://")):
            raise ValueError("api_base must be a valid HTTP/HTTPS URL")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


@dataclass(frozen=True)
class ArtistRef:
    """Artist reference embedded in songs and search hits."""

    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class Album:
    """Album a song belongs to."""

    name: Optional[str] = None
    artist_names: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class SongStats:
    """Song statistics (only pageviews are exposed)."""

    pageviews: Optional[int] = None


@dataclass(frozen=True)
class Credit:
    """Producer or writer credit."""

    name: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class SampledSong:
    """Song referenced by a "samples" relationship."""

    id: Optional[int] = None
    title: Optional[str] = None
    artist_names: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class SearchHit:
    """One search result item.

    Attributes:
        type: Discriminant reported by Genius ("song", "artist", "web_page", ...)
        id: Result identifier
        title: Song or web page title
        name: Artist name
        url: Result URL
        primary_artist: Primary artist (songs only)
    """

    type: str
    id: Optional[int] = None
    title: Optional[str] = None
    name: Optional[str] = None
    artist_names: Optional[str] = None
    url: Optional[str] = None
    primary_artist: Optional[ArtistRef] = None


@dataclass(frozen=True)
class SongSummary:
    """Song entry from an artist's song listing."""

    id: Optional[int]
    title: Optional[str] = None
    artist_names: Optional[str] = None
    full_title: Optional[str] = None
    url: Optional[str] = None
    release_date: Optional[str] = None
    lyrics_state: Optional[str] = None


@dataclass(frozen=True)
class SongDetails:
    """Full song metadata from /songs/{id}.

    Attributes:
        release_date: Upstream ``release_date_for_display``
        samples: Songs sampled by this song, in source order
    """

    id: Optional[int]
    title: Optional[str] = None
    artist_names: Optional[str] = None
    full_title: Optional[str] = None
    url: Optional[str] = None
    release_date: Optional[str] = None
    lyrics_state: Optional[str] = None
    primary_artist: Optional[ArtistRef] = None
    album: Optional[Album] = None
    stats: Optional[SongStats] = None
    producers: List[Credit] = field(default_factory=list)
    writers: List[Credit] = field(default_factory=list)
    samples: List[SampledSong] = field(default_factory=list)


@dataclass(frozen=True)
class ArtistDescription:
    """Artist biography in its plain and HTML renderings."""

    plain: Optional[str] = None
    html: Optional[str] = None


@dataclass(frozen=True)
class ArtistDetails:
    """Artist metadata from /artists/{id}."""

    id: Optional[int]
    name: Optional[str] = None
    url: Optional[str] = None
    description: ArtistDescription = field(default_factory=ArtistDescription)
