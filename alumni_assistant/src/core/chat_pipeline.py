"""
Alumni Assistant - Chat Pipeline
=================================
Orchestrates one chatbot request end to end.

Flow
----
    1. Read     → events, fundraising and internships fetched concurrently
                  (``asyncio.gather``); one failure fails the request.
    2. Format   → ``ContextBuilder`` renders the context block.
    3. Assemble → identity instruction + context + user message.
    4. Complete → one call through ``CompletionGateway``.
    5. Return   → reply text.

Every request rebuilds its context from the current store state; no
conversation history is kept between requests.

The store and gateway are constructed once at process start and injected
here (see ``alumni_assistant.src.main``).

Usage:
    pipeline = ChatPipeline(store, gateway, collections=CollectionNames.from_settings(settings))
    reply = await pipeline.answer("When is the reunion?")
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass

from langchain_core.messages import BaseMessage

from alumni_assistant.config.settings import Settings
from alumni_assistant.src.core.completion_gateway import CompletionGateway
from alumni_assistant.src.core.context_builder import ContextBuilder
from alumni_assistant.src.core.models import PlatformData
from alumni_assistant.src.core.prompt_assembler import assemble_messages
from alumni_assistant.src.database.document_store import DocumentStore
from alumni_assistant.src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CollectionNames:
    events: str = "events"
    fundraising: str = "fundraising"
    internships: str = "internships"

    @classmethod
    def from_settings(cls, settings: Settings) -> CollectionNames:
        return cls(events=settings.EVENTS_COLLECTION, fundraising=settings.FUNDRAISING_COLLECTION, internships=settings.INTERNSHIPS_COLLECTION)


async def fetch_platform_data(store: DocumentStore, collections: CollectionNames) -> PlatformData:
    """Read the three collections concurrently; any failure propagates."""
    events, fundraising, internships = await asyncio.gather(
        store.list_all(collections.events),
        store.list_all(collections.fundraising),
        store.list_all(collections.internships),
    )
    return PlatformData(events=events, fundraising=fundraising, internships=internships)


class ChatPipeline:
    """
    Stateless read → format → assemble → complete pipeline.

    Parameters
    ----------
    store
        ``DocumentStore`` used for the three collection reads.
    gateway
        ``CompletionGateway`` for the single model call.
    builder
        Optional custom ``ContextBuilder`` (defaults to unbounded).
    collections
        Collection names to read (defaults to the platform names).
    """

    __slots__ = ("_store", "_gateway", "_builder", "_collections")

    def __init__(self, store: DocumentStore, gateway: CompletionGateway, builder: ContextBuilder | None = None, collections: CollectionNames | None = None) -> None:
        self._store = store
        self._gateway = gateway
        self._builder = builder or ContextBuilder()
        self._collections = collections or CollectionNames()


    async def fetch_platform_data(self) -> PlatformData:
        return await fetch_platform_data(self._store, self._collections)


    async def build_context(self) -> str:
        """Return the context block for the current store state."""
        t_read = time.perf_counter()
        data = await self.fetch_platform_data()
        read_ms = (time.perf_counter() - t_read) * 1000
        logger.info("[PIPELINE] Read %d event(s), %d campaign(s), %d internship(s) in %.1fms", len(data.events), len(data.fundraising), len(data.internships), read_ms)
        return self._builder.build(data)


    async def build_messages(self, user_message: str) -> list[BaseMessage]:
        """Return the assembled message list for *user_message*."""
        context_block = await self.build_context()
        return assemble_messages(context_block, user_message)


    async def answer(self, user_message: str) -> str:
        """
        Run the full pipeline for one question.

        Raises
        ------
        StoreUnavailable
            If any of the three collection reads fails.
        CompletionFailed
            If the model call fails or returns no text.
        """
        t_start = time.perf_counter()
        messages = await self.build_messages(user_message)
        reply = await self._gateway.complete(messages)

        total_ms = (time.perf_counter() - t_start) * 1000
        logger.info("[PIPELINE] Total: %.1fms", total_ms)
        return reply
