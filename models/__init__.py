"""
Models package exports.
"""
from models.api_models import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    PortfolioContent,
    PLACEHOLDER_TEXT
)
from models.chat_models import AboutPage, HarvestResult

__all__ = [
    'ChatMessage',
    'ChatRequest',
    'ChatResponse',
    'ErrorResponse',
    'PortfolioContent',
    'PLACEHOLDER_TEXT',
    'AboutPage',
    'HarvestResult'
]
