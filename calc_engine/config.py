"""Process-level settings for calc-engine.

Uses pydantic-settings for environment variable support with validation.
Per-calculator limits live in each calculator's frozen Config dataclass.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Engine settings with environment variable support."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="Log format: json or console"
    )

    model_config = {
        "env_prefix": "CALC_ENGINE_",
        "extra": "ignore",
    }


# Singleton instance
_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = EngineSettings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (for testing)."""
    global _settings
    _settings = None
