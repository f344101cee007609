"""
alumni_assistant/src/main.py - Application Entry Point

Responsibility:
    This is the FastAPI application factory. It initializes the FastAPI instance,
    registers API route handlers from src/api/routes.py, and configures
    application-wide settings (logging level, CORS, the 405 error shape,
    lifespan events).

    On startup, the lifespan handler builds the shared resources exactly once
    (the motor client, the Gemini chat model) and injects them into a
    ``ChatPipeline`` stored on ``app.state``.  Nothing is created at import
    time, and a pre-built pipeline can be passed to ``create_app`` instead
    (tests do this).

Run:
    uvicorn alumni_assistant.src.main:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from alumni_assistant.config.settings import Settings, settings as default_settings
from alumni_assistant.src.api.routes import method_not_allowed_handler, router
from alumni_assistant.src.core.chat_pipeline import ChatPipeline, CollectionNames
from alumni_assistant.src.core.completion_gateway import CompletionGateway, create_chat_model
from alumni_assistant.src.core.context_builder import ContextBuilder
from alumni_assistant.src.database.document_store import DocumentStore, create_mongo_client
from alumni_assistant.src.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_pipeline(settings: Settings, mongo_client: object) -> ChatPipeline:
    """Wire the production pipeline from *settings* and an open motor client."""
    store = DocumentStore(mongo_client[settings.MONGO_DB_NAME])  # type: ignore[index]
    gateway = CompletionGateway(create_chat_model(settings))
    builder = ContextBuilder(settings.CONTEXT_MAX_RECORDS_PER_CATEGORY)
    return ChatPipeline(store, gateway, builder, CollectionNames.from_settings(settings))


def create_app(pipeline: ChatPipeline | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        pipeline: Pre-built pipeline.  When given, the lifespan handler
                  creates no clients of its own.
        settings: Settings override (defaults to the module singleton).
    """
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        mongo_client = None
        if app.state.pipeline is None:
            mongo_client = create_mongo_client(settings)
            app.state.pipeline = build_pipeline(settings, mongo_client)
            logger.info("Chat pipeline ready (model: %s, db: %s).", settings.LLM_MODEL, settings.MONGO_DB_NAME)
        try:
            yield
        finally:
            if mongo_client is not None:
                mongo_client.close()
                logger.info("MongoDB client closed.")

    app = FastAPI(title="Alumni Assistant API", description="Chatbot answering questions from alumni platform data", version="1.0.0", lifespan=lifespan)
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
