"""
Variant Resolver — Configuration

Loads from environment variables (and `.env`) with fallback defaults.

Usage:
    from variant_resolver.config import settings
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration for the variant resolver."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # False -> human-readable console renderer

    # -----------------------------------------------------------------------
    # Positional matching
    # By default only the supplied positions constrain a match, so a shorter
    # tuple matches on its prefix. When strict, the supplied tuple must have
    # exactly as many entries as the variant has option values.
    # -----------------------------------------------------------------------
    STRICT_OPTION_LENGTH: bool = False


# Singleton instance
settings = Settings()
