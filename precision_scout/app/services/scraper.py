"""
Website Scraper Module

Fetches a company website and reduces it to plain text for the
enrichment prompt.

Key Features:
- Async HTTP client with redirect following
- Retry with exponential backoff on transport errors
- Script/style stripping and whitespace normalisation
- Output truncation
"""

import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from ..utils.config import settings
from ..utils.logger import fetcher_logger as logger

_WHITESPACE = re.compile(r"\s+")
_NON_CONTENT_TAGS = ["script", "style", "noscript"]


class WebsiteFetchError(Exception):
    """Raised when a website cannot be fetched or returns a non-2xx status."""


def normalize_website(website: str) -> str:
    """Prefix https:// unless the value already carries an http(s) scheme."""
    website = website.strip()
    return website if website.startswith("http") else f"https://{website}"


def html_to_text(html: str, limit: Optional[int] = None) -> str:
    """
    Strip markup from an HTML document.

    Args:
        html: Raw HTML
        limit: Maximum characters to keep (defaults to settings.WEBSITE_TEXT_LIMIT)

    Returns:
        Visible text with all whitespace runs collapsed to single spaces
    """
    limit = settings.WEBSITE_TEXT_LIMIT if limit is None else limit
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()
    text = _WHITESPACE.sub(" ", soup.get_text(" ")).strip()
    return text[:limit]


class WebsiteScraper:
    """
    Service for fetching company websites as plain text.

    Use as an async context manager so the HTTP client is closed:

        async with WebsiteScraper() as scraper:
            text = await scraper.fetch_text("https://example.com")
    """

    def __init__(self, timeout: Optional[int] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout or settings.FETCH_TIMEOUT
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Set up the HTTP client when entering context."""
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.FETCH_USER_AGENT},
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        """Close the HTTP client when exiting context."""
        if self.client:
            await self.client.aclose()
            self.client = None

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(settings.FETCH_MAX_RETRIES),
        wait=wait_exponential(multiplier=1, min=1, max=5),
        reraise=True
    )
    async def _get(self, url: str) -> httpx.Response:
        return await self.client.get(url)

    async def fetch_text(self, url: str) -> str:
        """
        Fetch a page and return its visible text.

        Raises:
            WebsiteFetchError: On an invalid url, transport failure after retries or a non-2xx response
        """
        if not self.client:
            raise RuntimeError("HTTP client not initialized. Use with 'async with' context.")

        logger.info(f"Fetching website: {url}")
        try:
            response = await self._get(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error(f"Error fetching website {url}: {e}")
            raise WebsiteFetchError("Unable to fetch website content") from e

        if not response.is_success:
            logger.error(f"Failed to fetch site {url}: {response.status_code}")
            raise WebsiteFetchError(f"Failed to fetch site: {response.status_code}")

        text = html_to_text(response.text)
        logger.info(f"Fetched {len(text)} chars of text from {url}")
        return text
