"""
Alumni Assistant - Exception Hierarchy
=======================================
Errors raised by the chatbot pipeline.  The HTTP layer catches every
``AssistantError`` (and anything unexpected) at the route boundary and
converts it into the generic 500 response; the message of these
exceptions is for server logs only.
"""

from __future__ import annotations


class AssistantError(Exception):
    """Base class for all pipeline failures."""


class StoreUnavailable(AssistantError):
    """A collection could not be read from (or written to) the document store."""

    def __init__(self, collection: str, reason: str | None = None) -> None:
        self.collection = collection
        message = f"Document store unavailable for collection '{collection}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CompletionFailed(AssistantError):
    """The completion service call failed or returned no usable text."""
