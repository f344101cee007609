"""
Alumni Assistant - Centralized Configuration
=============================================
Uses ``pydantic-settings`` (``BaseSettings``) to load *all* configuration
from environment variables and the project-level ``.env`` file.

Security
--------
- ``GOOGLE_API_KEY`` is typed as ``SecretStr`` and has **no default value**.
  If the key is missing at startup, Pydantic will raise a ``ValidationError``
  with a clear error message.  The raw value is never exposed in repr,
  logs, or tracebacks.
- ``MONGO_URI`` is also ``SecretStr``: connection strings contain
  credentials and must never leak into logs.

Collections
-----------
The three platform collections read by the chatbot are configurable so
a staging database with prefixed names can be used without code changes.

Context Size
------------
``CONTEXT_MAX_RECORDS_PER_CATEGORY`` caps how many records of each
category are rendered into the context block.  ``None`` (the default)
renders every record.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings.

    Every field is loaded from environment variables (or ``.env``).
    Fields *without* a default are **required**: the app will refuse
    to start until they are provided.

    Attributes
    ----------
    GOOGLE_API_KEY : SecretStr
        API key for Google AI Studio (Gemini).  **Required.**
        Access the raw value with ``settings.GOOGLE_API_KEY.get_secret_value()``.
    MONGO_URI : SecretStr
        MongoDB connection string (e.g. ``mongodb://localhost:27017``).
        **Required.**  Contains credentials; never log raw value.
    MONGO_DB_NAME : str
        MongoDB database holding the platform collections.
    MONGO_TIMEOUT_MS : int
        Server-selection timeout handed to the motor client.
    ENV : Literal["dev", "prod"]
        Environment mode; picks the default logging verbosity.
    LOG_LEVEL : Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None
        Explicit logging level.  When unset, ``ENV`` decides
        (DEBUG in dev, WARNING in prod).
    LLM_MODEL : str
        Model identifier for the chat completion model.
    EVENTS_COLLECTION, FUNDRAISING_COLLECTION, INTERNSHIPS_COLLECTION : str
        Collection names read on every chatbot request.
    CONTEXT_MAX_RECORDS_PER_CATEGORY : int | None
        Optional per-category record cap for the context block.
    SEED_DIR : Path
        Directory holding the JSON seed files used by ``setup_db``.
    CORS_ORIGINS : list[str]
        Origins allowed to call the API from a browser.
    """

    # ── Resolved Absolute Paths ────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SEED_DIR: Path = BASE_DIR / "data" / "seed"

    # ── Environment Mode ───────────────────────────────────────────────
    ENV: Literal["dev", "prod"] = "dev"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    # ── API Keys (REQUIRED, no default) ───────────────────────────────
    GOOGLE_API_KEY: SecretStr

    # ── MongoDB (REQUIRED, no default) ────────────────────────────────
    MONGO_URI: SecretStr
    MONGO_DB_NAME: str = "alumni"
    MONGO_TIMEOUT_MS: int = 5000

    # ── Platform Collections ───────────────────────────────────────────
    EVENTS_COLLECTION: str = "events"
    FUNDRAISING_COLLECTION: str = "fundraising"
    INTERNSHIPS_COLLECTION: str = "internships"

    # ── Model Configuration ────────────────────────────────────────────
    LLM_MODEL: str = "gemini-2.0-flash"

    # ── Context Bound ──────────────────────────────────────────────────
    CONTEXT_MAX_RECORDS_PER_CATEGORY: int | None = None

    # ── HTTP ───────────────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = ["*"]

    # ── Validators ─────────────────────────────────────────────────────

    @field_validator("MONGO_TIMEOUT_MS")
    @classmethod
    def _timeout_floor(cls, v: int) -> int:
        if v < 100:
            raise ValueError(f"MONGO_TIMEOUT_MS must be ≥ 100, got {v}")
        return v


    @field_validator("CONTEXT_MAX_RECORDS_PER_CATEGORY")
    @classmethod
    def _cap_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"CONTEXT_MAX_RECORDS_PER_CATEGORY must be ≥ 1, got {v}")
        return v

    # ── Pydantic Settings Configuration ────────────────────────────────
    model_config = SettingsConfigDict(env_file=Path(__file__).resolve().parent.parent.parent / ".env", env_file_encoding="utf-8", extra="ignore")


# ── Singleton Instance ─────────────────────────────────────────────────
# Import this throughout the project:
#     from alumni_assistant.config.settings import settings
settings = Settings()
