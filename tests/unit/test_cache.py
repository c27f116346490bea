import pytest

from models.api_models import PortfolioContent
from utils.cache import ContentCache


@pytest.fixture
def clock(monkeypatch):
    """Controllable time source for TTL checks."""
    now = {"t": 1_000.0}
    monkeypatch.setattr("utils.cache.time.time", lambda: now["t"])
    return now


def test_disabled_cache_never_stores():
    """Given a TTL of 0, when content is set, get should still miss."""
    cache = ContentCache(ttl=0)
    cache.set("http://site", PortfolioContent(about="x"))

    assert not cache.enabled
    assert cache.get("http://site") is None
    assert len(cache) == 0


def test_enabled_cache_returns_stored_content(clock):
    """Given a positive TTL, when content is set, get should return an equal copy."""
    cache = ContentCache(ttl=60)
    content = PortfolioContent(about="Software engineer", projects={"a": "b"})
    cache.set("http://site/", content)

    cached = cache.get("HTTP://SITE")

    assert cached == content
    cached.projects["c"] = "d"
    assert cache.get("http://site").projects == {"a": "b"}


def test_entries_expire_after_ttl(clock):
    """Given an entry older than its TTL, when get is called, it should miss and drop the entry."""
    cache = ContentCache(ttl=60)
    cache.set("http://site", PortfolioContent())

    clock["t"] += 61

    assert cache.get("http://site") is None
    assert len(cache) == 0


def test_clear_drops_everything(clock):
    cache = ContentCache(ttl=60)
    cache.set("http://a", PortfolioContent())
    cache.set("http://b", PortfolioContent())

    cache.clear()

    assert len(cache) == 0
