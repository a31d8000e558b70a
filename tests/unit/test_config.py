"""
Unit tests for configuration loading.
"""

from pathlib import Path

import pytest
from imagescout.config import Config, load_config
from imagescout.config.config import MonitoringConfig, ScraperConfig, find_config_file
from imagescout.exceptions import ConfigurationError
from pydantic import ValidationError


@pytest.mark.unit
class TestDefaults:
    def test_scraper_defaults(self):
        scraper = Config().scraper

        assert scraper.base_url == "https://www.google.com/search"
        assert (scraper.search_mode, scraper.locale, scraper.safe_mode) == ("isch", "en", "off")
        assert scraper.timeout == 15.0
        assert scraper.max_redirects == 5
        assert scraper.accept_language == "en-US,en;q=0.9,fr;q=0.8"
        assert scraper.default_query == "cute cats "
        assert scraper.default_max_images == 10

    def test_monitoring_defaults(self):
        monitoring = Config().monitoring

        assert monitoring.log_level == "WARNING"
        assert monitoring.log_file is None
        assert monitoring.json_logs is False


@pytest.mark.unit
class TestValidation:
    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            ScraperConfig(timeout=timeout)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            ScraperConfig(max_redirects=-1)
        with pytest.raises(ValidationError):
            ScraperConfig(default_max_images=-1)

    def test_log_level_normalized(self):
        assert MonitoringConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            MonitoringConfig(log_level="LOUD")

    def test_log_file_parent_created(self, tmp_path):
        log_file = tmp_path / "logs" / "imagescout.log"

        config = MonitoringConfig(log_file=log_file)

        assert config.log_file == str(log_file)
        assert log_file.parent.is_dir()


@pytest.mark.unit
class TestYamlLoading:
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "imagescout.yaml"
        path.write_text(
            "scraper:\n  locale: fr\n  timeout: 3\nuser_agents:\n  include_mobile: false\n",
            encoding="utf-8",
        )

        config = Config.from_yaml(path)

        assert config.scraper.locale == "fr"
        assert config.scraper.timeout == 3.0
        assert config.scraper.safe_mode == "off"
        assert config.user_agents.include_mobile is False

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert Config.from_yaml(path).scraper.locale == "en"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_load_config_wraps_errors(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("scraper:\n  timeout: -1\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="bad.yaml"):
            load_config(bad)

    def test_load_config_invalid_yaml(self, tmp_path):
        bad = tmp_path / "broken.yaml"
        bad.write_text("scraper: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(bad)

    def test_load_config_missing_path(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "nope.yaml")


@pytest.mark.unit
class TestDiscovery:
    def test_find_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_config_file() is None

        (tmp_path / "imagescout.yml").write_text("scraper:\n  locale: de\n", encoding="utf-8")
        assert find_config_file() == tmp_path / "imagescout.yml"
        assert load_config().scraper.locale == "de"

    def test_yaml_preferred_over_yml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "imagescout.yml").write_text("{}", encoding="utf-8")
        (tmp_path / "imagescout.yaml").write_text("{}", encoding="utf-8")

        assert find_config_file() == Path(tmp_path / "imagescout.yaml")

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config().scraper.default_max_images == 10


@pytest.mark.unit
class TestEnvironment:
    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("IMAGESCOUT_SCRAPER__LOCALE", "es")
        monkeypatch.setenv("IMAGESCOUT_MONITORING__LOG_LEVEL", "info")

        config = Config()

        assert config.scraper.locale == "es"
        assert config.monitoring.log_level == "INFO"
