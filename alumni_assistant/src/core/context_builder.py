"""
Alumni Assistant - ContextBuilder
==================================
Renders the platform records into the single text block that is handed
to the completion model as grounding data.

Format::

    Here is the alumni platform data:

    Events:
    - Reunion 2024 (Social, N/A): 2024-12-01 at Campus Hall, organized by N/A

    Fundraising Campaigns:
    - Library Fund: raised 1200 of 5000 (organizer: N/A)

Rules:
    • Categories always appear in the order events → fundraising →
      internships.
    • A category with no records emits nothing (no header).
    • One line per record; missing fields render as ``N/A``.
    • If every category is empty the block is the preamble alone.

The output is a pure function of the record lists; the user's question
plays no part in it.
"""

from __future__ import annotations

from collections.abc import Callable

from alumni_assistant.config.prompt_templates import CONTEXT_PREAMBLE, EVENT_LINE_TEMPLATE, EVENTS_HEADER, FUNDRAISING_HEADER, FUNDRAISING_LINE_TEMPLATE, INTERNSHIP_LINE_TEMPLATE, INTERNSHIPS_HEADER
from alumni_assistant.src.core.models import Event, FundraisingCampaign, InternshipPosting, PlatformData, Record
from alumni_assistant.src.utils.logger import get_logger
from alumni_assistant.src.utils.text_utils import field_or_placeholder

logger = get_logger(__name__)


def format_event(record: Record) -> str:
    event = Event.model_validate(record)
    return EVENT_LINE_TEMPLATE.format(
        title=field_or_placeholder(event.title),
        type=field_or_placeholder(event.type),
        domain=field_or_placeholder(event.domain),
        date=field_or_placeholder(event.date),
        location=field_or_placeholder(event.location),
        organizer=field_or_placeholder(event.organizer),
        description=field_or_placeholder(event.description),
    )


def format_campaign(record: Record) -> str:
    campaign = FundraisingCampaign.model_validate(record)
    return FUNDRAISING_LINE_TEMPLATE.format(
        name=field_or_placeholder(campaign.display_name),
        amount_raised=field_or_placeholder(campaign.amountRaised),
        goal=field_or_placeholder(campaign.goal),
        organizer=field_or_placeholder(campaign.organizer),
    )


def format_internship(record: Record) -> str:
    posting = InternshipPosting.model_validate(record)
    return INTERNSHIP_LINE_TEMPLATE.format(
        title=field_or_placeholder(posting.title),
        company=field_or_placeholder(posting.company),
        posted_by=field_or_placeholder(posting.postedBy),
        duration=field_or_placeholder(posting.duration),
        stipend=field_or_placeholder(posting.stipend),
    )


class ContextBuilder:
    """
    Deterministic formatter for ``PlatformData``.

    Parameters
    ----------
    max_records_per_category
        Optional cap on rendered records per category (first *N* in
        store order).  ``None`` renders everything.
    """

    __slots__ = ("_max_records",)

    def __init__(self, max_records_per_category: int | None = None) -> None:
        if max_records_per_category is not None and max_records_per_category < 1:
            raise ValueError(f"max_records_per_category must be ≥ 1, got {max_records_per_category}")
        self._max_records = max_records_per_category


    def build(self, data: PlatformData) -> str:
        """Return the context block for *data*."""
        sections: list[tuple[str, list[Record], Callable[[Record], str]]] = [
            (EVENTS_HEADER, data.events, format_event),
            (FUNDRAISING_HEADER, data.fundraising, format_campaign),
            (INTERNSHIPS_HEADER, data.internships, format_internship),
        ]

        blocks: list[str] = [CONTEXT_PREAMBLE]
        for header, records, formatter in sections:
            if not records:
                continue
            rendered = self._limit(header, records)
            lines = [header] + [formatter(record) for record in rendered]
            blocks.append("\n".join(lines))

        context = "\n\n".join(blocks)
        logger.debug("[CONTEXT] %d section(s), %d chars.", len(blocks) - 1, len(context))
        return context


    def _limit(self, header: str, records: list[Record]) -> list[Record]:
        if self._max_records is None or len(records) <= self._max_records:
            return records
        logger.info("[CONTEXT] '%s' capped: %d → %d record(s).", header, len(records), self._max_records)
        return records[: self._max_records]
