"""
In-memory TTL cache for harvested portfolio content, keyed by base URL.
A TTL of 0 disables caching so every chat turn re-scrapes the site.
"""
import time
from dataclasses import dataclass
from typing import Dict, Optional

from config import Config
from models.api_models import PortfolioContent
from utils.logger import app_logger


@dataclass
class CacheEntry:
    """Harvested content with its expiry time."""
    content: PortfolioContent
    expires_at: float


class ContentCache:
    """
    Process-local cache of PortfolioContent snapshots.
    Concurrent misses are not de-duplicated; each one harvests independently.
    """

    def __init__(self, ttl: float = 0.0):
        """
        Initialize content cache.

        Args:
            ttl: Seconds an entry stays valid; 0 or less disables the cache
        """
        self._ttl = ttl
        self._entries: Dict[str, CacheEntry] = {}

    @property
    def enabled(self) -> bool:
        return self._ttl > 0

    @staticmethod
    def _make_key(base_url: str) -> str:
        return base_url.rstrip("/").lower()

    def get(self, base_url: str) -> Optional[PortfolioContent]:
        """
        Get cached content for a site.

        Args:
            base_url: Origin that was harvested

        Returns:
            Cached PortfolioContent or None if disabled, missing or expired
        """
        if not self.enabled:
            return None

        key = self._make_key(base_url)
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.expires_at < time.time():
            del self._entries[key]
            app_logger.debug(f"Cache: expired entry for {key}")
            return None

        app_logger.info(f"Cache HIT: content/{key}")
        return entry.content.model_copy(deep=True)

    def set(self, base_url: str, content: PortfolioContent) -> None:
        """Store content for a site; no-op when disabled."""
        if not self.enabled:
            return
        key = self._make_key(base_url)
        self._entries[key] = CacheEntry(
            content=content.model_copy(deep=True),
            expires_at=time.time() + self._ttl
        )
        app_logger.debug(f"Cache: stored content/{key} for {self._ttl:.0f}s")

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


_content_cache: Optional[ContentCache] = None


def get_content_cache() -> ContentCache:
    """Get the process-wide content cache, creating it from Config on first use."""
    global _content_cache
    if _content_cache is None:
        _content_cache = ContentCache(ttl=Config.CONTENT_CACHE_TTL)
    return _content_cache
