"""
Pydantic data models for API requests and responses.
"""
from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field, field_validator

PLACEHOLDER_TEXT = "No information available"


class ChatMessage(BaseModel):
    """Chat message model."""
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Chat request model. Only the latest user message is relayed."""
    message: str


class ChatResponse(BaseModel):
    """Successful chat reply."""
    response: str


class ErrorResponse(BaseModel):
    """Error body returned by the chat endpoints."""
    error: str
    details: Optional[str] = None
    stack: Optional[str] = None


class PortfolioContent(BaseModel):
    """
    Biographical content harvested from the portfolio site.
    Text fields always hold a value so prompt interpolation never renders None.
    """
    about: str = PLACEHOLDER_TEXT
    experience: str = PLACEHOLDER_TEXT
    education: str = PLACEHOLDER_TEXT
    skills: str = PLACEHOLDER_TEXT
    projects: Dict[str, str] = Field(default_factory=dict)
    contact: Dict[str, str] = Field(default_factory=dict)

    @field_validator("about", "experience", "education", "skills", mode="before")
    @classmethod
    def _fill_placeholder(cls, value):
        if value is None:
            return PLACEHOLDER_TEXT
        if isinstance(value, str) and not value.strip():
            return PLACEHOLDER_TEXT
        return value

    @field_validator("projects", "contact", mode="before")
    @classmethod
    def _empty_mapping(cls, value):
        return value or {}
