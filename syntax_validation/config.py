"""
Runtime configuration.

Settings are read from the environment, after loading a `.env` file when
one is present.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """
    Attributes:
        log_level: Root logging level name
        log_format: "text" or "json"
        metrics_enabled: Whether validation passes are recorded
    """
    log_level: str = "INFO"
    log_format: str = "text"
    metrics_enabled: bool = True


def load_settings() -> Settings:
    """Build settings from `.env` and the process environment."""
    load_dotenv()

    log_level = os.getenv("SYNTAX_VALIDATION_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unsupported log level: {log_level}")

    log_format = os.getenv("SYNTAX_VALIDATION_LOG_FORMAT", "text").lower()
    if log_format not in ("text", "json"):
        raise ValueError(f"Unsupported log format: {log_format}")

    return Settings(
        log_level=log_level,
        log_format=log_format,
        metrics_enabled=_env_flag("SYNTAX_VALIDATION_METRICS", True),
    )
