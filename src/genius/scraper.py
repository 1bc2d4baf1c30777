"""Scrape lyrics from public Genius song pages.

Genius does not expose lyrics through its API, so they are read from the
song's web page: the element with id ``lyrics-root`` hosts one or more
``Lyrics__Container*`` elements (usually one per song section), each of which
may contain ``LyricsHeader*`` UI elements that are not part of the lyrics.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from .exceptions import LyricsFetchError
from .models import GeniusConfig

logger = logging.getLogger(__name__)

LYRICS_ROOT_ID = "lyrics-root"
LYRICS_CONTAINER_SELECTOR = "[class^='Lyrics__Container']"
LYRICS_HEADER_SELECTOR = "[class^='LyricsHeader']"


def extract_lyrics(html: str) -> Optional[str]:
    """Extract lyrics text from a Genius song page.

    Header elements are removed from every container, ``<br>`` tags become
    newlines, and container texts are joined in document order with no
    separator (the markup already carries the line breaks).

    Args:
        html: Song page HTML

    Returns:
        Lyrics text, or None if the page has no lyrics root or no containers
    """
    soup = BeautifulSoup(html, "html.parser")

    root = soup.find(id=LYRICS_ROOT_ID)
    if root is None:
        return None

    containers = root.select(LYRICS_CONTAINER_SELECTOR)
    if not containers:
        return None

    for container in containers:
        for header in container.select(LYRICS_HEADER_SELECTOR):
            # nested headers go away with their parent
            if not header.decomposed:
                header.decompose()

    parts = []
    for container in containers:
        for br in container.find_all("br"):
            br.replace_with("\n")
        parts.append(container.get_text())

    return "".join(parts)


class LyricsScraper:
    """Fetch a song page and extract its lyrics.

    No authentication and no retries: a failed fetch raises, a page without
    lyrics yields None.
    """

    def __init__(
        self,
        config: GeniusConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "LyricsScraper":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def scrape(self, url: str) -> Optional[str]:
        """Fetch ``url`` and return its lyrics.

        Args:
            url: Public Genius song page URL

        Returns:
            Lyrics text, or None if the page exposes no lyrics

        Raises:
            LyricsFetchError: If the page responds with a non-2xx status
            httpx.HTTPError: For network errors
        """
        logger.debug(f"Fetching lyrics page {url}")
        response = await self.client.get(url, headers={"User-Agent": self.config.user_agent})

        if not response.is_success:
            logger.error(f"Lyrics page fetch failed: {response.status_code} {response.reason_phrase} ({url})")
            raise LyricsFetchError(response.status_code, response.reason_phrase)

        lyrics = extract_lyrics(response.text)
        if lyrics is None:
            logger.info(f"No lyrics found on {url}")
        return lyrics
