"""
Runtime Settings

Loaded from environment variables (and a ``.env`` file when present):

    JAM_NODES_LOG_LEVEL        logging level name (default INFO)
    JAM_NODES_VALIDATE_INPUT   validate input before execution (default true)
    JAM_NODES_VALIDATE_OUTPUT  validate output after execution (default true)
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


class Settings(BaseModel):
    """Settings consumed by the invocation helper and logger setup."""
    log_level: str = "INFO"
    validate_input: bool = True
    validate_output: bool = True

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {value}")
        return value


def load_settings() -> Settings:
    """Read settings from the environment."""
    load_dotenv()
    return Settings(
        log_level=os.getenv("JAM_NODES_LOG_LEVEL", "INFO"),
        validate_input=_env_flag("JAM_NODES_VALIDATE_INPUT", True),
        validate_output=_env_flag("JAM_NODES_VALIDATE_OUTPUT", True),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once."""
    return load_settings()
