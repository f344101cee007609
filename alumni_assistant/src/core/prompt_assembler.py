"""
Alumni Assistant - Prompt Assembly
===================================
Combines the assistant-identity instruction, the context block and the
user's message into the ordered message list sent to the chat model.

The order is fixed: identity instruction, then context, then question.
Nothing is truncated here; an oversized context block is passed through
as-is (see ``CONTEXT_MAX_RECORDS_PER_CATEGORY`` for the optional bound).
"""

from __future__ import annotations

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from alumni_assistant.config.prompt_templates import SYSTEM_PROMPT


def assemble_messages(context_block: str, user_message: str, system_prompt: str = SYSTEM_PROMPT) -> list[BaseMessage]:
    """Return ``[system instruction, system context, user message]``."""
    return [
        SystemMessage(content=system_prompt),
        SystemMessage(content=context_block),
        HumanMessage(content=user_message),
    ]
