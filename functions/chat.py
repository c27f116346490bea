"""
Serverless chat function (Netlify/AWS Lambda event shape).

Each invocation builds its own completion client and harvester, so no state
survives between requests. Text-mode harvesting is the default here because
function runtimes usually ship without a browser.
"""
import asyncio
import base64
import json

from pydantic import ValidationError

from config import Config
from models.api_models import ChatRequest, ChatResponse
from services.chat_service import ChatService
from services.completion import CompletionClient
from services.harvester import ContentHarvester
from utils.constants import CORS_HEADERS
from utils.http_client import HTTPClientManager
from utils.logger import app_logger

JSON_HEADERS = {**CORS_HEADERS, "Content-Type": "application/json"}


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": JSON_HEADERS,
        "body": json.dumps(body),
    }


def _parse_request(event: dict) -> ChatRequest:
    """Decode the event body; raises ValueError or ValidationError."""
    raw = event.get("body") or ""
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    return ChatRequest.model_validate(json.loads(raw))


async def _relay(message: str) -> str:
    client = CompletionClient.from_config()
    harvester = ContentHarvester(mode=Config.SERVERLESS_HARVEST_MODE)
    try:
        return await ChatService.respond(message, harvester, client)
    finally:
        await HTTPClientManager.close_all()


def handler(event: dict, context=None) -> dict:
    """
    Function entry point.

    Args:
        event: Gateway event with httpMethod and body
        context: Runtime context (unused)

    Returns:
        Gateway response dict with statusCode, headers and body
    """
    method = (event.get("httpMethod") or "").upper()

    if method == "OPTIONS":
        return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}

    if method != "POST":
        return _response(405, {"error": "Method not allowed"})

    app_logger.info("Received chat request")
    try:
        request = _parse_request(event)
    except (ValueError, ValidationError) as e:
        app_logger.error(f"Invalid chat request: {e}")
        return _response(400, {"error": "Request body must be JSON with a string 'message' field"})

    try:
        reply = asyncio.run(_relay(request.message))
        return _response(200, ChatResponse(response=reply).model_dump())
    except Exception as e:
        app_logger.error(f"Error in chat function: {e}")
        return _response(500, ChatService.build_error_response(e).model_dump(exclude_none=True))
