"""
Configuration management for imagescout using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imagescout.exceptions import ConfigurationError

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class ScraperConfig(BaseModel):
    """Search request and transport configuration."""

    base_url: str = Field(default="https://www.google.com/search", description="Search endpoint.")
    search_mode: str = Field(default="isch", description="Value of the `tbm` parameter (image search).")
    locale: str = Field(default="en", description="Interface language sent as `hl`.")
    safe_mode: str = Field(default="off", description="SafeSearch setting sent as `safe`.")
    timeout: float = Field(default=15.0, description="Total HTTP request timeout in seconds.")
    max_redirects: int = Field(default=5, description="Maximum redirects followed per request.")
    accept: str = Field(default="text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8")
    accept_language: str = Field(default="en-US,en;q=0.9,fr;q=0.8")
    default_query: str = Field(default="cute cats ", description="Query used when none is given.")
    default_max_images: int = Field(default=10, description="Result cap used when none is given.")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("max_redirects", "default_max_images")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("value must be >= 0")
        return v


class UserAgentConfig(BaseModel):
    include_mobile: bool = True
    custom_agents: List[str] = Field(default_factory=list)


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to stderr.")
    json_logs: bool = Field(default=False, description="Render log lines as JSON.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "imagescout"
    version: str = "0.1.0"
    scraper: ScraperConfig = Field(default_factory=ScraperConfig)
    user_agents: UserAgentConfig = Field(default_factory=UserAgentConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="IMAGESCOUT_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "imagescout.yaml", current_dir / "imagescout.yml"):
        if path.exists():
            return path
    return None


def load_config(path: Path | None = None) -> Config:
    """
    Load configuration from an explicit path, a discovered file, or defaults.

    Raises:
        ConfigurationError: if the file cannot be read or fails validation.
    """
    config_path = path or find_config_file()
    if config_path is None:
        log.debug("No config file found. Using default settings.")
        return Config()

    try:
        return Config.from_yaml(Path(config_path))
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise ConfigurationError(f"Invalid configuration in '{config_path}': {e}") from e
