"""
Route handlers exposing the harvested portfolio content.
"""
from fastapi import APIRouter, Depends

from config import Config
from models.api_models import PortfolioContent
from routes.dependencies import get_harvester
from services.harvester import ContentHarvester
from utils.logger import app_logger

router = APIRouter()


@router.get("/content", response_model=PortfolioContent)
@router.get("/api/content", response_model=PortfolioContent)
async def get_content(harvester: ContentHarvester = Depends(get_harvester)):
    """Harvest the portfolio site and return the raw content record."""
    app_logger.info("Received content request")
    return await harvester.harvest(Config.get_base_url())
