"""
Alumni Assistant - Prompt Templates & Context Formatting Constants
===================================================================
Centralised prompt management for the chatbot pipeline.  All text that
reaches the completion model lives here so it can be versioned and
reviewed independently of application logic.

Exports
-------
SYSTEM_PROMPT, CONTEXT_PREAMBLE, MISSING_FIELD_PLACEHOLDER,
EVENTS_HEADER, FUNDRAISING_HEADER, INTERNSHIPS_HEADER,
EVENT_LINE_TEMPLATE, FUNDRAISING_LINE_TEMPLATE, INTERNSHIP_LINE_TEMPLATE,
ERROR_METHOD_NOT_ALLOWED, ERROR_INVALID_BODY, ERROR_GENERIC.
"""

# ══════════════════════════════════════════════════════════════════════
#  SYSTEM PROMPT
# ══════════════════════════════════════════════════════════════════════

SYSTEM_PROMPT: str = "You are the AI Alumni Assistant. Answer ONLY using the provided alumni platform data."


# ══════════════════════════════════════════════════════════════════════
#  CONTEXT BLOCK
# ══════════════════════════════════════════════════════════════════════

CONTEXT_PREAMBLE: str = "Here is the alumni platform data:"

# Rendered in place of any missing or blank record field.
MISSING_FIELD_PLACEHOLDER: str = "N/A"

EVENTS_HEADER: str = "Events:"
FUNDRAISING_HEADER: str = "Fundraising Campaigns:"
INTERNSHIPS_HEADER: str = "Internships:"

EVENT_LINE_TEMPLATE: str = "- {title} ({type}, {domain}): {date} at {location}, organized by {organizer}; description: {description}"

FUNDRAISING_LINE_TEMPLATE: str = "- {name}: raised {amount_raised} of {goal} (organizer: {organizer})"

INTERNSHIP_LINE_TEMPLATE: str = "- {title} at {company} (posted by {posted_by}; duration: {duration}; stipend: {stipend})"


# ══════════════════════════════════════════════════════════════════════
#  HTTP ERROR BODIES
# ══════════════════════════════════════════════════════════════════════
# Client-facing messages only.  Upstream detail stays in the server log.

ERROR_METHOD_NOT_ALLOWED: str = "Method not allowed"
ERROR_INVALID_BODY: str = "Invalid request body"
ERROR_GENERIC: str = "Chatbot error"
