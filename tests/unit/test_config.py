import pytest
import structlog

from selectorkit.config.logging import configure_from_settings, setup_logging
from selectorkit.config.settings import Settings, get_settings
from selectorkit.exceptions import ConfigError


@pytest.mark.unit
class TestSettings:
    def test_default_settings(self) -> None:
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTORKIT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SELECTORKIT_LOG_JSON", "true")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTORKIT_LOG_LEVEL", "CHATTY")
        with pytest.raises(ConfigError, match="Unknown log level"):
            get_settings()


@pytest.mark.unit
class TestLogging:
    def test_setup_logging_configures_structlog(self) -> None:
        setup_logging(log_level="DEBUG", json_output=True)
        assert structlog.is_configured()

    def test_configure_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTORKIT_LOG_JSON", "true")
        configure_from_settings()
        assert structlog.is_configured()
