import pytest
from fsview.config.loader import AppConfig
from fsview.utils.exceptions import ConfigurationError
from fsview.utils.logger import DEFAULT_FORMAT


class TestAppConfig:
    """Test cases for AppConfig"""

    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch):
        """Remove fsview settings from the environment."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "FSVIEW_EXCLUDE", "FSVIEW_PREDICATE"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        """Test the configuration when nothing is set."""
        config = AppConfig.load()

        assert config.log_level == "INFO"
        assert config.log_format == DEFAULT_FORMAT
        assert config.exclude == ""
        assert config.predicate == "any"

    def test_values_from_environment(self, monkeypatch):
        """Test that environment variables are read and normalized."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "%(message)s")
        monkeypatch.setenv("FSVIEW_EXCLUDE", "?!")
        monkeypatch.setenv("FSVIEW_PREDICATE", "Alpha")

        config = AppConfig.load()

        assert config.log_level == "DEBUG"
        assert config.log_format == "%(message)s"
        assert config.exclude == "?!"
        assert config.predicate == "alpha"

    def test_invalid_log_level(self, monkeypatch):
        """Test that an unknown log level is rejected."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig.load()

        assert "CHATTY" in str(exc_info.value)
