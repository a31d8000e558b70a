"""Configuration models and loaders."""

from .config import Config, MonitoringConfig, ScraperConfig, UserAgentConfig, find_config_file, load_config

__all__ = ["Config", "MonitoringConfig", "ScraperConfig", "UserAgentConfig", "find_config_file", "load_config"]
