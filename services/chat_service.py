"""
Chat service containing the relay logic.
Handles prompt assembly and the harvest -> prompt -> completion flow.
"""
import traceback
from typing import Dict, Optional

from config import Config, ConfigurationError
from models.api_models import ChatMessage, ErrorResponse, PortfolioContent
from services.completion import CompletionClient
from services.harvester import ContentHarvester
from utils.constants import (
    GENERIC_ERROR_MESSAGE,
    NO_CONTACT_TEXT,
    NO_PROJECTS_TEXT,
    OUT_OF_SCOPE_REPLY,
    PORTFOLIO_SYSTEM_PROMPT,
)
from utils.logger import app_logger


class ChatService:
    """Service for handling chat logic."""

    @staticmethod
    def _format_entries(entries: Dict[str, str], empty_text: str) -> str:
        """Render a mapping as `key: value` lines."""
        if not entries:
            return empty_text
        return "\n".join(f"{name}: {text}" for name, text in entries.items())

    @staticmethod
    def assemble_prompt(content: PortfolioContent,
                        owner_name: Optional[str] = None,
                        owner_title: Optional[str] = None) -> str:
        """
        Interpolate harvested content into the persona system prompt.

        Args:
            content: Harvested portfolio content
            owner_name: Persona name, defaults to Config.PORTFOLIO_OWNER_NAME
            owner_title: Persona title, defaults to Config.PORTFOLIO_OWNER_TITLE

        Returns:
            The system prompt
        """
        return PORTFOLIO_SYSTEM_PROMPT.format(
            owner_name=owner_name or Config.PORTFOLIO_OWNER_NAME,
            owner_title=owner_title or Config.PORTFOLIO_OWNER_TITLE,
            about=content.about,
            experience=content.experience,
            education=content.education,
            skills=content.skills,
            projects=ChatService._format_entries(content.projects, NO_PROJECTS_TEXT),
            contact=ChatService._format_entries(content.contact, NO_CONTACT_TEXT),
            out_of_scope=OUT_OF_SCOPE_REPLY,
        )

    @staticmethod
    def prepare_messages(system_prompt: str, message: str) -> list:
        """System prompt plus the single latest user message; no history is kept."""
        return [
            ChatMessage(role="system", content=system_prompt).model_dump(),
            ChatMessage(role="user", content=message).model_dump(),
        ]

    @staticmethod
    async def respond(message: str,
                      harvester: ContentHarvester,
                      client: CompletionClient,
                      base_url: Optional[str] = None) -> str:
        """
        Turn one user message into one assistant reply.

        Args:
            message: User text, relayed as-is
            harvester: Source of fresh portfolio content
            client: Completion API client
            base_url: Site to harvest, defaults to Config.get_base_url()

        Returns:
            The completion's text, unmodified

        Raises:
            ConfigurationError: No API key; nothing is harvested or sent
            CompletionError, httpx.RequestError: Upstream failures
        """
        if not client.is_configured:
            app_logger.error("GROQ_API_KEY is not set")
            raise ConfigurationError("GROQ_API_KEY environment variable is not set")

        app_logger.info(f"Message received: {len(message)} characters")

        content = await harvester.harvest(base_url or Config.get_base_url())
        system_prompt = ChatService.assemble_prompt(content)
        messages = ChatService.prepare_messages(system_prompt, message)

        return await client.chat(messages)

    @staticmethod
    def build_error_response(error: Exception) -> ErrorResponse:
        """
        Map an exception to the client-facing error body.
        Diagnostic fields are only filled outside production.
        """
        if isinstance(error, ConfigurationError):
            message = "Server misconfiguration: GROQ_API_KEY not set"
        else:
            message = GENERIC_ERROR_MESSAGE

        if Config.is_production():
            return ErrorResponse(error=message)

        return ErrorResponse(
            error=message,
            details=str(error),
            stack="".join(traceback.format_exception(type(error), error, error.__traceback__)),
        )
