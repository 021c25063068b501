"""Wikipedia client - rate-limited article search and fetch."""

import asyncio
import json
import time
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp
import structlog

from career_scraper.config import WikipediaSettings, settings

logger = structlog.get_logger()

# Base wait after HTTP 429, multiplied by the attempt number
RATE_LIMIT_BACKOFF_SECONDS = 30


class FetchError(Exception):
    """Raised when a page cannot be fetched."""
    pass


class WikipediaClient:
    """
    Fetch Wikipedia articles one at a time.

    Every request waits until at least `rate_limit_seconds` have passed since
    the previous one.
    """

    def __init__(self, config: Optional[WikipediaSettings] = None):
        self.config = config or settings.wikipedia
        self.session: Optional[aiohttp.ClientSession] = None
        self._last_request: Optional[float] = None

    async def start_session(self):
        """Initialize HTTP session."""
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/json;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
        self.session = aiohttp.ClientSession(
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
        )

    async def close_session(self):
        """Close HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> "WikipediaClient":
        await self.start_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close_session()

    async def _wait_for_slot(self):
        """Sleep until the minimum interval since the last request has elapsed."""
        if self._last_request is not None:
            elapsed = time.monotonic() - self._last_request
            remaining = self.config.rate_limit_seconds - elapsed
            if remaining > 0:
                await asyncio.sleep(remaining)
        self._last_request = time.monotonic()

    async def fetch_page(self, url: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Fetch a page with retries.

        Raises:
            FetchError: If the session is not started or every attempt failed
        """
        if not self.session:
            raise FetchError(f"Session not initialized: {url}")

        last_error = None

        for attempt in range(self.config.max_retries):
            await self._wait_for_slot()

            try:
                async with self.session.get(url, params=params) as response:
                    if response.status == 200:
                        content = await response.text()
                        logger.info("page_fetched", url=url, status=response.status, size=len(content))
                        return content

                    last_error = f"HTTP {response.status}"

                    if response.status == 429:
                        if attempt + 1 == self.config.max_retries:
                            logger.warning("rate_limited", url=url, attempts=attempt + 1)
                            break
                        wait_time = RATE_LIMIT_BACKOFF_SECONDS * (attempt + 1)
                        logger.warning("rate_limited", url=url, wait_time=wait_time)
                        await asyncio.sleep(wait_time)
                        continue

                    logger.warning("http_error", url=url, status=response.status, attempt=attempt + 1)

                    # Client errors will not fix themselves
                    if response.status < 500:
                        break

            except asyncio.TimeoutError:
                last_error = "timeout"
                logger.warning(
                    "request_timeout",
                    url=url,
                    attempt=attempt + 1,
                    timeout=self.config.request_timeout,
                )
            except aiohttp.ClientError as e:
                last_error = f"{type(e).__name__}: {e}"
                logger.error("client_error", url=url, error=str(e), attempt=attempt + 1)

        raise FetchError(f"Failed to fetch {url}: {last_error}")

    def article_url(self, title: str) -> str:
        return f"{self.config.base_url}/wiki/{quote(title.replace(' ', '_'))}"

    async def search_title(self, player_name: str) -> Optional[str]:
        """
        Title of the best search hit for a player, or None.

        Raises:
            FetchError: If the request fails or the response is not a search result
        """
        params = {
            "action": "query",
            "list": "search",
            "srsearch": f"{player_name}{self.config.search_suffix}",
            "srlimit": "1",
            "format": "json",
        }
        body = await self.fetch_page(self.config.api_url, params=params)

        try:
            data = json.loads(body)
            results = data.get("query", {}).get("search", [])
            if not results:
                logger.info("article_not_found", player=player_name)
                return None
            return results[0]["title"]
        except (json.JSONDecodeError, AttributeError, KeyError, IndexError, TypeError) as e:
            logger.warning("search_response_invalid", player=player_name, error=str(e))
            raise FetchError(f"Invalid search response for {player_name}: {e}") from e

    async def fetch_article(self, title: str) -> str:
        return await self.fetch_page(self.article_url(title))
