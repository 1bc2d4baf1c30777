"""Genius API client module for song metadata and lyrics."""

__version__ = "0.1.0"

from .client import GeniusClient
from .exceptions import (
    GeniusAPIError,
    GeniusAuthenticationError,
    GeniusError,
    GeniusNotFoundError,
    LyricsFetchError,
)
from .models import (
    Album,
    ArtistDescription,
    ArtistDetails,
    ArtistRef,
    Credit,
    GeniusConfig,
    SampledSong,
    SearchHit,
    SongDetails,
    SongStats,
    SongSummary,
)
from .scraper import LyricsScraper, extract_lyrics

__all__ = [
    # Client
    "GeniusClient",
    # Scraper
    "LyricsScraper",
    "extract_lyrics",
    # Models
    "GeniusConfig",
    "Album",
    "ArtistDescription",
    "ArtistDetails",
    "ArtistRef",
    "Credit",
    "SampledSong",
    "SearchHit",
    "SongDetails",
    "SongStats",
    "SongSummary",
    # Exceptions
    "GeniusError",
    "GeniusAuthenticationError",
    "GeniusAPIError",
    "GeniusNotFoundError",
    "LyricsFetchError",
]
