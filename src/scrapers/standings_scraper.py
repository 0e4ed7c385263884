from loguru import logger

from .base_scraper import BaseScraper, ScraperError


class StandingsScraper(BaseScraper):
    """Fetches league standings pages as raw HTML."""

    source: str = "standings"

    async def fetch_standings(self, url: str) -> str:
        """Returns the HTML of the standings page at ``url``.

        Raises ScraperTimeoutError when the page does not arrive within the
        configured time budget and ScraperError for any other failure.
        """
        logger.info(f"Fetching standings from {url}")
        response = await self._make_request(method="GET", url=url)

        html = response.text
        if not html.strip():
            raise ScraperError(f"Empty standings page returned by {url}")

        logger.debug(f"Fetched {len(html)} characters of standings HTML from {url}")
        return html
