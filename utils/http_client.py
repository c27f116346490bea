"""
HTTP client utilities with connection pooling.
Provides reusable httpx clients for page fetching and completion calls.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages shared httpx clients with connection pooling."""

    _scrape_client: httpx.AsyncClient | None = None
    _completion_client: httpx.AsyncClient | None = None

    @classmethod
    def get_scrape_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for fetching portfolio pages.

        Features:
        - Connection pooling (reuses TCP connections)
        - Automatic redirect following

        Returns:
            Configured httpx.AsyncClient for raw HTML fetches
        """
        if cls._scrape_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONCURRENT_SCRAPES,
                max_keepalive_connections=5,
                keepalive_expiry=30.0
            )

            cls._scrape_client = httpx.AsyncClient(
                timeout=Config.WEB_SCRAPING_TIMEOUT,
                follow_redirects=True,
                max_redirects=Config.MAX_REDIRECTS,
                limits=limits,
                headers={
                    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                    "Cache-Control": "no-cache",
                },
                http2=True
            )

        return cls._scrape_client

    @classmethod
    def get_completion_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for the completion API.

        Returns:
            Configured httpx.AsyncClient for chat completion requests
        """
        if cls._completion_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONCURRENT_SCRAPES * 2,
                max_keepalive_connections=10,
                keepalive_expiry=60.0
            )

            cls._completion_client = httpx.AsyncClient(
                timeout=Config.COMPLETION_TIMEOUT,
                limits=limits,
                http2=True
            )

        return cls._completion_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close all managed clients and clean up connections.
        """
        if cls._scrape_client is not None:
            await cls._scrape_client.aclose()
            cls._scrape_client = None

        if cls._completion_client is not None:
            await cls._completion_client.aclose()
            cls._completion_client = None
