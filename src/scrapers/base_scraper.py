import asyncio
from typing import Dict, Optional

import httpx
from loguru import logger

from src.config.settings import settings

# Standings sites serve a bot-check page to clients without browser headers
BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class ScraperTimeoutError(ScraperError):
    """Exception raised when a request exceeds its time budget."""

    pass


class BaseScraper:
    """Owns the HTTP client used to pull pages from an upstream site."""

    source: str = "upstream"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            headers=BROWSER_HEADERS,
        )

    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes a single HTTP request; failures are not retried."""
        logger.debug(f"Making {method} request to {url}")
        try:
            # httpx timeouts are per phase; wait_for bounds the whole exchange
            response = await asyncio.wait_for(
                self.client.request(
                    method,
                    url,
                    headers=headers,
                    timeout=self.timeout,
                    **kwargs,
                ),
                self.timeout,
            )
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            logger.debug(f"Request successful: {response.status_code} for {url}")
            return response

        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning(
                f"Request to {self.source} at {url} timed out after {self.timeout}s: {e!r}"
            )
            raise ScraperTimeoutError(
                f"Request to {url} timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error during request for {self.source}: {e.response.status_code} - {e}"
            )
            raise ScraperError(f"HTTP error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error for {self.source} at {url}: {e!r}")
            raise ScraperError(str(e) or e.__class__.__name__) from e

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug(f"Closed HTTP client for {self.source}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
