"""Application configuration via environment variables with NUMSTR_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from numstr_format.models.schema import Justification


class Settings(BaseSettings):
    """Number string formatting defaults.

    All settings are read from environment variables prefixed with ``NUMSTR_``,
    e.g. ``NUMSTR_DEFAULT_LOCALE=DE``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMSTR_")

    # ── Locale ─────────────────────────────────────────────────────────────
    default_locale: str = "US"
    default_currency: bool = False
    default_currency_variant: str | None = None

    # ── Number field ───────────────────────────────────────────────────────
    default_field_length: int = Field(default=-1, ge=-1, le=1_000_000)
    default_justification: Justification = Justification.RIGHT

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
