"""
kotlin-senior Settings Configuration

This module provides centralized configuration management using Pydantic settings.
Configuration is loaded from the environment and .env by default; YAML loading is supported.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """MCP server identity advertised to clients on initialization."""

    model_config = SettingsConfigDict(env_prefix="SERVER_", extra="ignore")

    name: str = Field(default="mcp-kotlin-senior", description="Server name reported to MCP clients")
    version: str = Field(default="1.0.0", description="Server version reported to MCP clients")
    instructions: Optional[str] = Field(default=None, description="Optional usage instructions for clients")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("server name must not be empty")
        return v.strip()


class LoggingSettings(BaseSettings):
    """Logging configuration: level, format (json/console), and optional log file path."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field(default="console", description="Format: 'json' or 'console'")
    # stdout carries the MCP protocol, so logs go to stderr unless a file is set
    log_file: Optional[str] = Field(default=None, description="Optional log file path (default: stderr)")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ("json", "console")
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u


class Settings(BaseSettings):
    """
    Root settings class. Loads from the environment and .env; supports creation from YAML.

    Nested models: server, logging.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    server: ServerSettings = Field(default_factory=ServerSettings, description="MCP server identity")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Create Settings from a YAML file. Top-level keys should match
        nested model names (server, logging).
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        kwargs: dict[str, Any] = {}
        for name, model_class in [
            ("server", ServerSettings),
            ("logging", LoggingSettings),
        ]:
            if name in data and isinstance(data[name], dict):
                kwargs[name] = model_class.model_validate(data[name])
        return cls(**kwargs)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings(path: str | Path | None = None) -> Settings:
    """Force reload of settings from the environment, or from a YAML file when ``path`` is given."""
    global _settings
    _settings = Settings.from_yaml(path) if path is not None else Settings()
    return _settings
