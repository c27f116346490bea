"""
Health and service info endpoints.
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from config import Config

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness check; never touches the harvester or the completion API."""
    return {"status": "ok"}


@router.get("/")
async def root():
    """Root endpoint - service banner."""
    return {
        "message": f"{Config.APP_TITLE} is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": {
            "health": "/health",
            "content": "/api/content",
            "chat": "/chat",
        },
    }
