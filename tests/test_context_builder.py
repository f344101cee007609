"""Tests for ContextBuilder: section layout, placeholders, ordering, record cap."""

import pytest

from alumni_assistant.config.prompt_templates import CONTEXT_PREAMBLE, EVENTS_HEADER, FUNDRAISING_HEADER, INTERNSHIPS_HEADER
from alumni_assistant.src.core.context_builder import ContextBuilder, format_campaign, format_event, format_internship
from alumni_assistant.src.core.models import PlatformData


_EVENT = {"title": "Reunion 2024", "date": "2024-12-01", "type": "Social", "domain": "General", "location": "Campus Hall", "organizer": "Alumni Office", "description": "Homecoming dinner"}
_CAMPAIGN = {"campaignName": "Library Fund", "amountRaised": 1200, "goal": 5000, "organizer": "Class of 2005"}
_INTERNSHIP = {"title": "Backend Intern", "company": "Acme", "postedBy": "Priya", "duration": "3 months", "stipend": "500 USD"}


class TestEmptyCategories:
    def test_all_empty_is_preamble_only(self):
        assert ContextBuilder().build(PlatformData()) == CONTEXT_PREAMBLE

    @pytest.mark.parametrize(
        "data, absent",
        [
            (PlatformData(fundraising=[_CAMPAIGN], internships=[_INTERNSHIP]), EVENTS_HEADER),
            (PlatformData(events=[_EVENT], internships=[_INTERNSHIP]), FUNDRAISING_HEADER),
            (PlatformData(events=[_EVENT], fundraising=[_CAMPAIGN]), INTERNSHIPS_HEADER),
        ],
    )
    def test_empty_category_has_no_header(self, data, absent):
        assert absent not in ContextBuilder().build(data)


class TestLayout:
    def test_single_event_scenario(self):
        context = ContextBuilder().build(PlatformData(events=[{"title": "Reunion 2024", "date": "2024-12-01", "location": "Campus Hall"}]))

        lines = context.split("\n")
        assert lines[0] == CONTEXT_PREAMBLE
        assert lines[1] == ""
        assert lines[2] == EVENTS_HEADER
        record_lines = [line for line in lines if line.startswith("- ")]
        assert len(record_lines) == 1
        assert "Reunion 2024" in record_lines[0]
        assert "2024-12-01" in record_lines[0]
        assert "Campus Hall" in record_lines[0]
        assert FUNDRAISING_HEADER not in context
        assert INTERNSHIPS_HEADER not in context

    def test_categories_in_fixed_order(self):
        context = ContextBuilder().build(PlatformData(events=[_EVENT], fundraising=[_CAMPAIGN], internships=[_INTERNSHIP]))
        assert context.index(EVENTS_HEADER) < context.index(FUNDRAISING_HEADER) < context.index(INTERNSHIPS_HEADER)

    def test_sections_separated_by_blank_line(self):
        context = ContextBuilder().build(PlatformData(events=[_EVENT], fundraising=[_CAMPAIGN]))
        assert f"{CONTEXT_PREAMBLE}\n\n{EVENTS_HEADER}\n" in context
        assert f"\n\n{FUNDRAISING_HEADER}\n" in context
        assert not context.endswith("\n")

    def test_one_line_per_record_in_store_order(self):
        events = [dict(_EVENT, title=f"Event {i}") for i in range(3)]
        context = ContextBuilder().build(PlatformData(events=events))
        record_lines = [line for line in context.split("\n") if line.startswith("- ")]
        assert [line.split(" (")[0] for line in record_lines] == ["- Event 0", "- Event 1", "- Event 2"]

    def test_deterministic(self):
        data = PlatformData(events=[_EVENT], fundraising=[_CAMPAIGN], internships=[_INTERNSHIP])
        assert ContextBuilder().build(data) == ContextBuilder().build(data)


class TestRecordTemplates:
    def test_event_line(self):
        assert format_event(_EVENT) == "- Reunion 2024 (Social, General): 2024-12-01 at Campus Hall, organized by Alumni Office; description: Homecoming dinner"

    def test_campaign_line(self):
        assert format_campaign(_CAMPAIGN) == "- Library Fund: raised 1200 of 5000 (organizer: Class of 2005)"

    def test_campaign_extra_fields_not_rendered(self):
        line = format_campaign(dict(_CAMPAIGN, deadline="2025-06-30"))
        assert line == "- Library Fund: raised 1200 of 5000 (organizer: Class of 2005)"

    def test_campaign_falls_back_to_title(self):
        line = format_campaign({"title": "Scholarship Drive", "amountRaised": 10, "goal": 100})
        assert line.startswith("- Scholarship Drive:")

    def test_internship_line(self):
        assert format_internship(_INTERNSHIP) == "- Backend Intern at Acme (posted by Priya; duration: 3 months; stipend: 500 USD)"

    def test_missing_fields_render_placeholder(self):
        assert format_event({}) == "- N/A (N/A, N/A): N/A at N/A, organized by N/A; description: N/A"
        assert format_campaign({}) == "- N/A: raised N/A of N/A (organizer: N/A)"
        assert format_internship({"title": "Intern", "company": "Acme"}) == "- Intern at Acme (posted by N/A; duration: N/A; stipend: N/A)"

    def test_multiline_field_stays_on_one_line(self):
        line = format_event(dict(_EVENT, location="Campus\nHall"))
        assert "\n" not in line
        assert "Campus Hall" in line

    def test_unexpected_field_types_do_not_raise(self):
        line = format_event({"title": ["a", "b"], "date": {"nested": True}, "extra": object()})
        assert line.startswith("- ")

    @pytest.mark.parametrize("record_id", [5, 2.5, {"$oid": "abc"}, None])
    def test_non_string_id_does_not_raise(self, record_id):
        assert format_event({"id": record_id, "title": "Reunion 2024"}).startswith("- Reunion 2024 ")
        assert format_campaign({"id": record_id, "title": "Library Fund"}).startswith("- Library Fund:")
        assert format_internship({"id": record_id, "title": "Intern"}).startswith("- Intern at ")


class TestRecordCap:
    def test_cap_keeps_first_records(self):
        events = [dict(_EVENT, title=f"Event {i}") for i in range(5)]
        context = ContextBuilder(max_records_per_category=2).build(PlatformData(events=events))
        assert "Event 0" in context
        assert "Event 1" in context
        assert "Event 2" not in context

    def test_cap_applies_per_category(self):
        data = PlatformData(events=[_EVENT] * 3, internships=[_INTERNSHIP] * 3)
        context = ContextBuilder(max_records_per_category=1).build(data)
        assert len([line for line in context.split("\n") if line.startswith("- ")]) == 2

    def test_invalid_cap_rejected(self):
        with pytest.raises(ValueError):
            ContextBuilder(max_records_per_category=0)
