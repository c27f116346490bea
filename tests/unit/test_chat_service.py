import pytest

from config import Config, ConfigurationError
from models.api_models import PLACEHOLDER_TEXT, PortfolioContent
from services.chat_service import ChatService
from services.completion import CompletionError
from utils.constants import GENERIC_ERROR_MESSAGE, NO_CONTACT_TEXT, NO_PROJECTS_TEXT, OUT_OF_SCOPE_REPLY
from tests.fixtures.mock_clients import FakeCompletionClient, FakeHarvester


def test_assemble_prompt_interpolates_every_section(portfolio_content):
    """Given harvested content, when assemble_prompt is called, every section should appear under its heading."""
    prompt = ChatService.assemble_prompt(portfolio_content, owner_name="Jane Doe", owner_title="Data Engineer")

    assert prompt.startswith("You are Jane Doe, a Data Engineer.")
    assert "About Me:\nSoftware engineer\n" in prompt
    assert "My Professional Experience:\nDeveloper at Acme Corp\n" in prompt
    assert "My Education:\nMSc Computer Science\n" in prompt
    assert "My Technical Skills:\nPython, React\n" in prompt
    assert "My Projects:\ncodeedgeai: AI code review assistant\n" in prompt
    assert "My Contact Information:\nemail: roja@example.com\n" in prompt
    assert OUT_OF_SCOPE_REPLY in prompt


def test_assemble_prompt_uses_configured_persona(monkeypatch):
    """Given no explicit persona, when assemble_prompt is called, the configured owner should be used."""
    monkeypatch.setattr(Config, "PORTFOLIO_OWNER_NAME", "Roja Pinnamraju")
    monkeypatch.setattr(Config, "PORTFOLIO_OWNER_TITLE", "Software Engineer and AI enthusiast")
    prompt = ChatService.assemble_prompt(PortfolioContent())
    assert prompt.startswith("You are Roja Pinnamraju, a Software Engineer and AI enthusiast.")


def test_assemble_prompt_with_empty_content_has_no_none_artifacts():
    """Given an all-placeholder record, when assemble_prompt is called, no None should leak into the prompt."""
    prompt = ChatService.assemble_prompt(PortfolioContent())

    assert "None" not in prompt
    assert prompt.count(PLACEHOLDER_TEXT) == 4
    assert NO_PROJECTS_TEXT in prompt
    assert NO_CONTACT_TEXT in prompt


def test_assemble_prompt_keeps_braces_in_content_literal():
    """Given content containing braces, when assemble_prompt is called, they should be copied verbatim."""
    prompt = ChatService.assemble_prompt(PortfolioContent(skills="{python} and {react}"))
    assert "{python} and {react}" in prompt


def test_prepare_messages_sends_only_system_and_latest_user_message():
    """Given a prompt and message, when prepare_messages is called, exactly two messages should be produced."""
    messages = ChatService.prepare_messages("system text", "hi")
    assert messages == [
        {"role": "system", "content": "system text"},
        {"role": "user", "content": "hi"},
    ]


@pytest.mark.anyio
async def test_respond_relays_message_with_harvested_context(portfolio_content):
    """Given a harvester returning 'Software engineer', when respond is called with 'hi', the completion call should carry both and the reply pass through unmodified."""
    harvester = FakeHarvester(portfolio_content)
    client = FakeCompletionClient(responses=["  Hi! *waves*  "])

    reply = await ChatService.respond("hi", harvester, client, base_url="http://portfolio.test")

    assert reply == "  Hi! *waves*  "
    assert harvester.calls == ["http://portfolio.test"]
    [messages] = client.call_history
    assert messages[0]["role"] == "system"
    assert "Software engineer" in messages[0]["content"]
    assert messages[1] == {"role": "user", "content": "hi"}


@pytest.mark.anyio
async def test_respond_defaults_to_configured_base_url(monkeypatch):
    """Given no base URL, when respond is called, the configured site should be harvested."""
    monkeypatch.setattr(Config, "PORTFOLIO_URL", "https://example.netlify.app/")
    harvester = FakeHarvester()

    await ChatService.respond("hello", harvester, FakeCompletionClient())

    assert harvester.calls == ["https://example.netlify.app"]


@pytest.mark.anyio
async def test_respond_without_api_key_never_calls_upstream():
    """Given a client without credentials, when respond is called, it should raise before harvesting or calling the API."""
    harvester = FakeHarvester()
    client = FakeCompletionClient(api_key="")

    with pytest.raises(ConfigurationError):
        await ChatService.respond("hi", harvester, client)

    assert harvester.calls == []
    assert client.call_history == []


@pytest.mark.anyio
async def test_respond_propagates_completion_errors():
    """Given the completion API failing, when respond is called, the error should reach the caller."""
    client = FakeCompletionClient(error=CompletionError(429, "Rate limit reached"))

    with pytest.raises(CompletionError):
        await ChatService.respond("hi", FakeHarvester(), client, base_url="http://portfolio.test")


def test_build_error_response_includes_details_outside_production(monkeypatch):
    """Given development mode, when an error is mapped, details and stack should be included."""
    monkeypatch.setattr(Config, "ENVIRONMENT", "development")
    try:
        raise RuntimeError("upstream exploded")
    except RuntimeError as e:
        body = ChatService.build_error_response(e)

    assert body.error == GENERIC_ERROR_MESSAGE
    assert body.details == "upstream exploded"
    assert "RuntimeError: upstream exploded" in body.stack


def test_build_error_response_hides_details_in_production(monkeypatch):
    """Given production mode, when an error is mapped, only the generic message should remain."""
    monkeypatch.setattr(Config, "ENVIRONMENT", "production")
    body = ChatService.build_error_response(RuntimeError("secret internals"))

    assert body.model_dump(exclude_none=True) == {"error": GENERIC_ERROR_MESSAGE}


def test_build_error_response_explains_missing_configuration(monkeypatch):
    """Given a configuration error, when mapped, the message should say what is misconfigured even in production."""
    monkeypatch.setattr(Config, "ENVIRONMENT", "production")
    body = ChatService.build_error_response(ConfigurationError("GROQ_API_KEY environment variable is not set"))

    assert "GROQ_API_KEY" in body.error
