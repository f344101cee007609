"""Tests for Settings validation and the text helpers."""

import pytest
from pydantic import ValidationError

from alumni_assistant.config.settings import Settings
from alumni_assistant.src.utils.text_utils import clean_text, field_or_placeholder, single_line

_REQUIRED = {"GOOGLE_API_KEY": "key", "MONGO_URI": "mongodb://user:pw@db:27017"}


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None, **_REQUIRED)
        assert s.EVENTS_COLLECTION == "events"
        assert s.FUNDRAISING_COLLECTION == "fundraising"
        assert s.INTERNSHIPS_COLLECTION == "internships"
        assert s.CONTEXT_MAX_RECORDS_PER_CATEGORY is None

    def test_secrets_hidden_in_repr(self):
        s = Settings(_env_file=None, **_REQUIRED)
        assert "pw@db" not in repr(s)
        assert s.MONGO_URI.get_secret_value() == "mongodb://user:pw@db:27017"

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MONGO_URI="mongodb://localhost")

    @pytest.mark.parametrize("field, value", [("CONTEXT_MAX_RECORDS_PER_CATEGORY", 0), ("MONGO_TIMEOUT_MS", 10)])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **_REQUIRED, **{field: value})


class TestTextUtils:
    def test_clean_text(self):
        assert clean_text("  a   b \n\n\n\n c  ") == "a b\n\nc"

    def test_single_line(self):
        assert single_line("Campus\n  Hall\t East") == "Campus Hall East"

    @pytest.mark.parametrize("value", [None, "", "   ", "\n"])
    def test_placeholder_for_missing(self, value):
        assert field_or_placeholder(value) == "N/A"

    @pytest.mark.parametrize("value, expected", [(0, "0"), (1200, "1200"), (2.5, "2.5"), ("x", "x")])
    def test_scalars_rendered(self, value, expected):
        assert field_or_placeholder(value) == expected
