"""
FastAPI dependencies resolving the objects built in the application lifespan.
"""
from fastapi import Request

from services.completion import CompletionClient
from services.harvester import ContentHarvester, create_harvester
from utils.cache import get_content_cache


def get_completion_client(request: Request) -> CompletionClient:
    """Completion client constructed at startup."""
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        client = CompletionClient.from_config()
        request.app.state.completion_client = client
    return client


def get_harvester(request: Request) -> ContentHarvester:
    """Content harvester constructed at startup."""
    harvester = getattr(request.app.state, "harvester", None)
    if harvester is None:
        harvester = create_harvester(cache=get_content_cache())
        request.app.state.harvester = harvester
    return harvester
