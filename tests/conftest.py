import pytest
from unittest.mock import AsyncMock

from models.api_models import PortfolioContent


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def portfolio_content():
    """Typical harvested content."""
    return PortfolioContent(
        about="Software engineer",
        experience="Developer at Acme Corp",
        education="MSc Computer Science",
        skills="Python, React",
        projects={"codeedgeai": "AI code review assistant"},
        contact={"email": "roja@example.com"},
    )


@pytest.fixture
def fake_completion_client():
    from tests.fixtures.mock_clients import FakeCompletionClient
    return FakeCompletionClient(responses=["Hi!"])


@pytest.fixture
def fake_harvester(portfolio_content):
    from tests.fixtures.mock_clients import FakeHarvester
    return FakeHarvester(portfolio_content)


@pytest.fixture
def playwright_builder():
    from tests.fixtures.mock_clients import PlaywrightBuilder
    return PlaywrightBuilder()


@pytest.fixture
def mock_http_client():
    """Mock HTTP client for page fetches and completion calls."""
    client = AsyncMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    return client


@pytest.fixture
def configured_app(monkeypatch, fake_completion_client, fake_harvester):
    """The real application with the completion client and harvester replaced."""
    from fastapi.testclient import TestClient
    from config import Config
    from main import app
    from routes.dependencies import get_completion_client, get_harvester

    monkeypatch.setattr(Config, "ENVIRONMENT", "development")
    monkeypatch.setattr(Config, "PORTFOLIO_URL", "http://portfolio.test")

    app.dependency_overrides[get_completion_client] = lambda: fake_completion_client
    app.dependency_overrides[get_harvester] = lambda: fake_harvester

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
