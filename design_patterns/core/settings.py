"""
Global settings (Pydantic BaseSettings with Singleton)
Environment-variable based configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path
from typing import Optional
from design_patterns.core.patterns.singleton import Singleton


class SettingsMeta(Singleton, type(BaseSettings)):
    """
    Metaclass combining Singleton and BaseSettings
    Ensures Settings is a singleton
    """
    pass


class Settings(BaseSettings, metaclass=SettingsMeta):
    """Application-wide settings"""

    model_config = SettingsConfigDict(
        env_prefix="DESIGN_PATTERNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    # ===== Logging =====
    log_level: str = Field(default="WARNING")
    log_dir: Optional[Path] = Field(default=None)  # per-run log file when set

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_settings() -> Settings:
    """
    Return the settings singleton

    Settings uses the Singleton metaclass, so instantiating it
    directly always returns the same object as well
    """
    return Settings()
