"""
Portfolio Chat Relay - FastAPI application behind the portfolio site's chat widget.
Harvests the site's own pages for biographical content and relays chat messages to a hosted LLM.
"""
import sys

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from config import Config
from routes import chat, content, health
from middleware import RequestLoggingMiddleware
from services.completion import CompletionClient
from services.harvester import create_harvester
from utils.cache import get_content_cache
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app.state.completion_client = CompletionClient.from_config()
    app.state.harvester = create_harvester(cache=get_content_cache())
    app_logger.info(f"Harvesting from {Config.get_base_url()} in {Config.HARVEST_MODE} mode")
    yield
    await HTTPClientManager.close_all()

app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with user-friendly messages"""
    errors = exc.errors()
    app_logger.error(f"Validation error for {request.url}")
    app_logger.error(f"Errors: {errors}")

    if errors:
        first_error = errors[0]
        error_type = first_error.get('type', '')
        loc = first_error.get('loc') or []
        field = loc[-1] if loc else 'field'

        if error_type == 'json_invalid':
            message = "Request body is not valid JSON"
        elif error_type == 'missing':
            message = f"Field '{field}' is required"
        else:
            message = f"{field}: {first_error.get('msg', 'Validation error')}"

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            content={
                "error": message,
                "detail": [{
                    "msg": message,
                    "type": error_type,
                    "loc": list(loc)
                }]
            },
        )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"error": "Invalid request", "detail": []},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """JSON body for 404s and other HTTP errors raised by routing."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        app_logger.info(f"404 Not Found: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "Not Found",
                "message": f"Cannot {request.method} {request.url.path}"
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, tags=["health"])
app.include_router(content.router, tags=["content"])
app.include_router(chat.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn

    if not Config.GROQ_API_KEY:
        app_logger.critical("GROQ_API_KEY is not defined in environment variables")
        sys.exit(1)

    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
