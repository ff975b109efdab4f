"""Solver configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Solver settings loaded from ICARUS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ICARUS_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Attempts
    times: int = 1
    max_moves: int = 0  # 0 = no limit per attempt
    seed: Optional[int] = None

    # Maze host (daedalus)
    host: str = "127.0.0.1"
    port: int = 1337
    request_timeout: float = 10.0  # seconds

    # Logging
    log_level: str = "INFO"

    @field_validator("times", "max_moves")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must not be negative")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown ones."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def base_url(self) -> str:
        """Base URL of the maze host."""
        return f"http://{self.host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
