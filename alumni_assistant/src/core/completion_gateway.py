"""
Alumni Assistant - Completion Gateway
======================================
Single point of contact with the chat completion model.

The model is injected (any LangChain ``BaseChatModel``, or anything
with a compatible ``ainvoke``), so the gateway itself holds no
credentials and tests can pass a scripted fake.  Exactly one call is
made per request; there is no retry.

Network, authentication and quota failures, and replies whose content is
missing or not text, all surface as ``CompletionFailed``.  An empty text
reply is returned as-is.
"""

from __future__ import annotations

import time
from typing import Any

from langchain_core.messages import BaseMessage

from alumni_assistant.config.settings import Settings
from alumni_assistant.src.core.exceptions import CompletionFailed
from alumni_assistant.src.utils.logger import get_logger

logger = get_logger(__name__)


def create_chat_model(settings: Settings) -> Any:
    """
    Build the production Gemini chat model.

    Only the model identifier and API key are set; sampling parameters
    are left at the service defaults.
    """
    from langchain_google_genai import ChatGoogleGenerativeAI

    llm = ChatGoogleGenerativeAI(model=settings.LLM_MODEL, google_api_key=settings.GOOGLE_API_KEY.get_secret_value())
    logger.info("LLM initialised: %s", settings.LLM_MODEL)
    return llm


def _extract_text(content: object) -> str | None:
    """
    Pull plain text out of a message ``content`` (str or list of parts).

    ``None`` means the reply carried no text at all; an empty string is a
    valid (empty) reply.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
        if content and not parts:
            return None
        return "".join(parts)
    return None


class CompletionGateway:
    """
    Wraps one chat model behind ``complete(messages) -> str``.

    Parameters
    ----------
    llm
        Object exposing ``async ainvoke(messages)`` returning a message
        with a ``content`` attribute.
    """

    __slots__ = ("_llm",)

    def __init__(self, llm: Any) -> None:
        self._llm = llm


    async def complete(self, messages: list[BaseMessage]) -> str:
        """
        Send *messages* to the model and return the reply text.

        Raises
        ------
        CompletionFailed
            If the call raises, or the reply content is missing or not text.
        """
        t_llm = time.perf_counter()
        try:
            response = await self._llm.ainvoke(messages)
        except Exception as exc:
            logger.error("[LLM] Completion call failed: %s", type(exc).__name__)
            raise CompletionFailed(f"completion call failed: {type(exc).__name__}") from exc

        text = _extract_text(getattr(response, "content", None))
        if text is None:
            logger.error("[LLM] Completion returned no text content (%s).", type(response).__name__)
            raise CompletionFailed("completion returned no text content")

        llm_ms = (time.perf_counter() - t_llm) * 1000
        logger.info("[LLM] Reply received in %.1fms (%d chars).", llm_ms, len(text))
        return text
