"""
Alumni Assistant - Record & Request Models
===========================================
Pydantic models for the platform records read by the chatbot and for
the HTTP request / response bodies.

Records are written by the platform's admin pages, which are lenient
about which fields they fill in, so every record field is optional and
unknown fields are kept (``extra="allow"``).  Validation never fails on
a sparse document; the context builder renders the gaps as ``N/A``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict

# ── Type aliases ───────────────────────────────────────────────────────
Record = dict[str, object]
FieldValue = Any


class _PlatformRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: FieldValue = None


class Event(_PlatformRecord):
    title: FieldValue = None
    date: FieldValue = None
    type: FieldValue = None
    domain: FieldValue = None
    location: FieldValue = None
    organizer: FieldValue = None
    description: FieldValue = None


class FundraisingCampaign(_PlatformRecord):
    campaignName: FieldValue = None
    title: FieldValue = None
    amountRaised: FieldValue = None
    goal: FieldValue = None
    organizer: FieldValue = None

    @property
    def display_name(self) -> FieldValue:
        """``campaignName`` when set, else the ``title`` the admin form writes."""
        if self.campaignName not in (None, ""):
            return self.campaignName
        return self.title


class InternshipPosting(_PlatformRecord):
    title: FieldValue = None
    company: FieldValue = None
    postedBy: FieldValue = None
    duration: FieldValue = None
    stipend: FieldValue = None
    domain: FieldValue = None
    type: FieldValue = None


@dataclass(frozen=True)
class PlatformData:
    """The three record lists a context block is built from."""

    events: list[Record] = field(default_factory=list)
    fundraising: list[Record] = field(default_factory=list)
    internships: list[Record] = field(default_factory=list)


# ── HTTP bodies ────────────────────────────────────────────────────────

class ChatRequest(BaseModel):
    message: str | None = None


class ChatResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
