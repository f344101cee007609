"""
alumni_assistant/src/api/routes.py - API Route Definitions

Responsibility:
    Defines the REST surface of the chatbot service:
      - POST /api/chatbot → answer a question grounded in platform data
      - any other verb on /api/chatbot → 405 {"error": "Method not allowed"}
        (via ``method_not_allowed_handler``, registered in src/main.py)
      - GET  /health      → liveness probe

    Each route handler is a thin controller: it validates the incoming request,
    delegates business logic to src/core/chat_pipeline.py, and formats the response.
    No business logic or database calls live in this file.

Error Policy:
    Every pipeline failure is caught here, logged with its traceback, and
    turned into a generic 500 body.  Upstream detail (store errors, model
    errors, API key problems) never reaches the caller.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from alumni_assistant.config.prompt_templates import ERROR_GENERIC, ERROR_INVALID_BODY, ERROR_METHOD_NOT_ALLOWED
from alumni_assistant.src.core.chat_pipeline import ChatPipeline
from alumni_assistant.src.core.models import ChatRequest, ChatResponse, ErrorResponse
from alumni_assistant.src.utils.logger import get_logger

logger = get_logger(__name__)

CHAT_PATH = "/api/chatbot"
SERVICE_NAME = "alumni-assistant"

router = APIRouter()


def get_pipeline(request: Request) -> ChatPipeline:
    """Return the pipeline built at startup (see ``main.lifespan``)."""
    return request.app.state.pipeline


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump(), headers=headers)


async def _read_message(request: Request) -> str | None:
    """
    Extract the ``message`` field from the request body.

    Returns ``None`` when the body is not a JSON object or ``message`` is
    not a string.  An empty body, a missing field and ``null`` all mean
    the empty question ``""``.
    """
    raw = await request.body()
    if not raw.strip():
        return ""
    try:
        payload = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    try:
        chat_request = ChatRequest.model_validate(payload)
    except ValidationError:
        return None
    return chat_request.message or ""


@router.post(CHAT_PATH, response_model=ChatResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def chatbot(request: Request, pipeline: ChatPipeline = Depends(get_pipeline)):
    message = await _read_message(request)
    if message is None:
        logger.info("Rejected chatbot request: invalid body.")
        return _error(400, ERROR_INVALID_BODY)

    try:
        reply = await pipeline.answer(message)
    except Exception:
        logger.exception("Chatbot error")
        return _error(500, ERROR_GENERIC)

    return ChatResponse(reply=reply)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Render 405s in the service's error shape; any other HTTP error keeps
    FastAPI's default body.

    The router raises the 405 for every verb a path has no route for
    (custom verbs included) and sets ``Allow`` to the registered methods.
    """
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    allow = (exc.headers or {}).get("Allow", "POST")
    return _error(405, ERROR_METHOD_NOT_ALLOWED, headers={"Allow": allow})


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": SERVICE_NAME}
