"""Environment-based configuration using pydantic-settings.

    CLEAN_CODE_REACT_LOG_LEVEL=DEBUG
    CLEAN_CODE_REACT_PER_PATTERN_TOOLS=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLEAN_CODE_REACT_",
        extra="ignore",
    )

    server_name: str = Field(default="clean-code-react", min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    per_pattern_tools: bool = Field(
        default=False,
        description="Also expose one no-argument tool per pattern (get_builder_pattern, ...)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
