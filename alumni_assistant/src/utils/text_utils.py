"""
Alumni Assistant - Text Utilities
==================================
Helpers for normalising free-text record fields before they are stored
(seed loader) or rendered into the chatbot context block.

These utilities are stateless and side-effect-free.
"""

from __future__ import annotations

import re
import unicodedata

from alumni_assistant.config.prompt_templates import MISSING_FIELD_PLACEHOLDER


# ── Non-printable character pattern ────────────────────────────────────
# Matches control characters (C0/C1), except \n, \r, \t which we handle
# separately. Also catches BOM, zero-width chars, soft hyphens, etc.
_NON_PRINTABLE_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f\ufeff\u200b\u200c\u200d\u200e\u200f\u00ad\u2060\ufffe]")
_WHITESPACE_RE = re.compile(r"\s+")


# ── Public API ─────────────────────────────────────────────────────────

def clean_text(text: str) -> str:
    """
    Sanitise a free-text field typed into one of the platform forms.

    Steps:
        1. Unicode NFC normalisation (canonical composition).
        2. Strip non-printable / zero-width characters and formatting
           artifacts (BOM, soft hyphens, directional marks).
        3. Collapse runs of horizontal whitespace into a single space,
           *preserving* newlines.
        4. Strip leading / trailing whitespace from every line.
        5. Collapse 3+ consecutive blank lines to 2.

    Args:
        text: Raw field value.

    Returns:
        Cleaned, normalised text.
    """
    text = unicodedata.normalize("NFC", text)
    text = _NON_PRINTABLE_RE.sub("", text)
    text = re.sub(r"[^\S\n]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def single_line(text: str) -> str:
    """Collapse *text* (including newlines) onto one whitespace-normalised line."""
    return _WHITESPACE_RE.sub(" ", clean_text(text)).strip()


def field_or_placeholder(value: object) -> str:
    """
    Render a record field for the context block.

    ``None``, empty strings and whitespace-only strings become
    ``MISSING_FIELD_PLACEHOLDER``; numbers and other scalars are
    stringified.  Never raises.
    """
    if value is None:
        return MISSING_FIELD_PLACEHOLDER
    rendered = single_line(str(value))
    return rendered or MISSING_FIELD_PLACEHOLDER
