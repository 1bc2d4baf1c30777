"""Async HTTP client for the Genius API."""

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .exceptions import GeniusAPIError, GeniusAuthenticationError, GeniusNotFoundError
from .models import ArtistDetails, GeniusConfig, SearchHit, SongDetails, SongSummary
from .transform import parse_artist, parse_search_hit, parse_song, parse_song_summary

logger = logging.getLogger(__name__)


class GeniusClient:
    """Async HTTP client for the Genius API (https://api.genius.com).

    This client:
    - Attaches the bearer token from GeniusConfig to every request
    - Fails fast with GeniusAuthenticationError when no token is configured
    - Checks both the HTTP status and the ``meta.status`` embedded in the body
    - Parses responses into typed records from ``genius.models``

    The client keeps no per-request state and can be shared between
    concurrent tasks.

    Attributes:
        config: GeniusConfig with API origin and credential
        client: httpx.AsyncClient bound to the API origin

    Example:
        >>> config = GeniusConfig(access_token="secret")
        >>> async with GeniusClient(config) as client:
        ...     song = await client.get_song(378195)
        ...     print(song.full_title)
    """

    def __init__(
        self,
        config: GeniusConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Genius API client.

        Args:
            config: GeniusConfig with API origin and access token
            transport: Optional httpx transport (used by tests)
        """
        self.config = config
        self._base_url = config.api_base.rstrip("/")

        self.client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
        )

        logger.info(f"Initialized Genius client for {self._base_url}")

    async def __aenter__(self) -> "GeniusClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.client.aclose()

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers with the bearer token.

        Raises:
            GeniusAuthenticationError: If no access token is configured
        """
        token = self.config.access_token
        if not token:
            raise GeniusAuthenticationError(
                "Authentication required: no Genius access token configured "
                "(set GENIUS_ACCESS_TOKEN)"
            )

        return {
            "Authorization": f"Bearer {token}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    @staticmethod
    def _build_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        """Drop unset values and stringify the rest.

        Examples:
            >>> GeniusClient._build_params({"sort": "title", "page": None, "per_page": 20})
            {'sort': 'title', 'per_page': '20'}
        """
        if not params:
            return {}
        return {key: str(value) for key, value in params.items() if value is not None}

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        """Parse and validate a Genius API response.

        Genius wraps every payload in ``{"meta": {...}, "response": {...}}``
        and may report an error in ``meta.status`` with HTTP 200, so both
        statuses are checked and the embedded one takes precedence.

        Args:
            response: HTTP response from the Genius API

        Returns:
            Parsed response body

        Raises:
            GeniusAPIError: If either status reports a failure
        """
        try:
            data = response.json()
        except ValueError:
            data = None

        meta = data.get("meta") if isinstance(data, dict) else None
        if not isinstance(meta, dict):
            meta = {}
        meta_status = meta.get("status")
        embedded_failure = isinstance(meta_status, int) and meta_status >= 400

        if not response.is_success or embedded_failure:
            status = meta_status if embedded_failure else response.status_code
            message = meta.get("message") or response.reason_phrase
            logger.error(f"Genius API error {status}: {message}")
            raise GeniusAPIError(status, message)

        if not isinstance(data, dict):
            logger.error(f"Genius API returned a non-JSON body (HTTP {response.status_code})")
            raise GeniusAPIError(response.status_code, "Invalid JSON response")

        return data

    async def request(
        self, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Perform an authenticated GET against the API.

        Args:
            endpoint: Path relative to the API origin (e.g., "/songs/378195")
            params: Optional query parameters (None values are skipped)

        Returns:
            Full response body (``meta`` and ``response``)

        Raises:
            GeniusAuthenticationError: If no access token is configured
            GeniusAPIError: If the API reports a failure
            httpx.HTTPError: For network errors
        """
        headers = self._build_headers()
        query = self._build_params(params)

        logger.debug(f"GET {endpoint} params={query}")
        response = await self.client.get(endpoint, params=query, headers=headers)
        return self._handle_response(response)

    async def search(self, q: str) -> List[SearchHit]:
        """Search songs, artists and web pages.

        Args:
            q: Free-text query

        Returns:
            List of SearchHit (empty if the API returned no hits)
        """
        data = await self.request("/search", {"q": q})
        hits = (data.get("response") or {}).get("hits") or []
        logger.info(f"Search for {q!r} returned {len(hits)} hits")
        return [parse_search_hit(hit) for hit in hits]

    async def get_song(self, song_id: int) -> SongDetails:
        """Fetch song details.

        Raises:
            GeniusNotFoundError: If the response carries no song
        """
        data = await self.request(f"/songs/{song_id}")
        song = (data.get("response") or {}).get("song")
        if not song:
            raise GeniusNotFoundError(
                "No song details found for the provided ID or unexpected response from the API."
            )
        return parse_song(song)

    async def get_artist(self, artist_id: int) -> ArtistDetails:
        """Fetch artist details.

        Raises:
            GeniusNotFoundError: If the response carries no artist
        """
        data = await self.request(f"/artists/{artist_id}")
        artist = (data.get("response") or {}).get("artist")
        if not artist:
            raise GeniusNotFoundError(
                "No artist details found for the provided ID or unexpected response from the API."
            )
        return parse_artist(artist)

    async def get_artist_songs(
        self,
        artist_id: int,
        sort: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> List[SongSummary]:
        """List songs of an artist.

        Args:
            artist_id: Genius artist ID
            sort: "title" or "popularity" (optional)
            page: Page number starting at 1 (optional)
            per_page: Results per page, at most 50 (optional)

        Returns:
            List of SongSummary (empty if the artist has none)
        """
        data = await self.request(
            f"/artists/{artist_id}/songs",
            {"sort": sort, "page": page, "per_page": per_page},
        )
        songs = (data.get("response") or {}).get("songs") or []
        return [parse_song_summary(song) for song in songs]
