"""Environment-variable-based configuration for the velo builder CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_BUILDER: str = "decathlon"
DEFAULT_LOG_LEVEL: str = "WARNING"
DEFAULT_CUSTOM_STEPS: str = "guidon,roue"


@dataclass(frozen=True)
class Settings:
    """Configuration snapshot taken from the environment."""

    default_builder: str = DEFAULT_BUILDER
    log_level: str = DEFAULT_LOG_LEVEL
    custom_steps: str = DEFAULT_CUSTOM_STEPS


def _resolve_log_level(raw: str) -> str:
    """Upper-case *raw*; unknown level names fall back to DEFAULT_LOG_LEVEL."""
    level = raw.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    logger.warning(
        "Unknown VELO_BUILDER_LOG_LEVEL %r, using %s", raw, DEFAULT_LOG_LEVEL,
    )
    return DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Read VELO_BUILDER_* environment variables into Settings."""
    return Settings(
        default_builder=os.environ.get("VELO_BUILDER_DEFAULT", DEFAULT_BUILDER),
        log_level=_resolve_log_level(
            os.environ.get("VELO_BUILDER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        ),
        custom_steps=os.environ.get("VELO_BUILDER_CUSTOM_STEPS", DEFAULT_CUSTOM_STEPS),
    )
