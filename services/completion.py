"""
Client for the hosted chat-completion API (Groq, OpenAI-compatible).
"""
from typing import List, Optional

import httpx

from config import Config
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class CompletionError(Exception):
    """Non-success response from the completion API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Completion API error (status {status_code}): {message}")


class CompletionClient:
    """Sends a message list to /chat/completions and returns the first choice's text."""

    def __init__(
        self,
        api_key: str,
        base_url: str = Config.GROQ_API_URL,
        model: str = Config.GROQ_MODEL,
        temperature: float = Config.TEMPERATURE,
        max_tokens: int = Config.MAX_TOKENS,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._http_client = http_client

    @classmethod
    def from_config(cls) -> "CompletionClient":
        """Build a client from environment settings. The key may be empty."""
        return cls(
            api_key=Config.GROQ_API_KEY,
            base_url=Config.GROQ_API_URL,
            model=Config.GROQ_MODEL,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or HTTPClientManager.get_completion_client()

    def build_payload(self, messages: List[dict]) -> dict:
        """Request body for a single non-streaming completion."""
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def chat(self, messages: List[dict]) -> str:
        """
        Create a chat completion.

        Args:
            messages: OpenAI-style message dicts (system + user)

        Returns:
            Content of the first choice, unmodified

        Raises:
            CompletionError: The API answered with a non-200 status or an unusable body
            httpx.RequestError: Transport failure
        """
        app_logger.info(f"Creating chat completion with {self.model}")
        response = await self.http_client.post(
            f"{self.base_url}/chat/completions",
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json=self.build_payload(messages),
        )

        if response.status_code != 200:
            raise CompletionError(response.status_code, self._error_message(response))

        data = response.json()
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise CompletionError(response.status_code, "Malformed completion response")

        if content is None:
            raise CompletionError(response.status_code, "Empty completion")

        app_logger.info(f"Chat completion created: {len(content)} characters")
        return content

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Best-effort extraction of the upstream error message."""
        try:
            body = response.json()
        except ValueError:
            return response.text or "Unknown error"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return error.get("message") or str(error)
        return str(error) if error else (response.text or "Unknown error")
