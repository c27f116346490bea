"""
Route handlers for chat operations.
Handles the /chat endpoint.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from models.api_models import ChatRequest, ChatResponse
from routes.dependencies import get_completion_client, get_harvester
from services.chat_service import ChatService
from services.completion import CompletionClient, CompletionError
from services.harvester import ContentHarvester
from utils.logger import app_logger

router = APIRouter()


def send_error_response(e: Exception) -> JSONResponse:
    """500 response carrying the generic apology and, outside production, diagnostics."""
    body = ChatService.build_error_response(e)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(exclude_none=True),
    )


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest,
               client: CompletionClient = Depends(get_completion_client),
               harvester: ContentHarvester = Depends(get_harvester)):
    """
    Chat endpoint: relays one message, with freshly harvested portfolio context,
    to the completion API.
    """
    try:
        app_logger.info("Received chat request")
        reply = await ChatService.respond(request.message, harvester, client)
        return ChatResponse(response=reply)

    except CompletionError as e:
        app_logger.error(f"Completion API error: {e.message} (status {e.status_code})")
        return send_error_response(e)
    except Exception as e:
        app_logger.error(f"Chat error: {str(e)}")
        return send_error_response(e)
