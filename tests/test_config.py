"""
Unit Tests for Dashboard Configuration
"""

import pytest


class TestDashboardSettings:
    """Tests for loading settings from the environment"""

    def test_defaults_from_empty_env(self):
        from config import DashboardSettings

        settings = DashboardSettings.from_env({})

        assert settings.polygon_api_key is None
        assert settings.polygon_base_url == "https://api.polygon.io"
        assert settings.azure_endpoint is None
        assert settings.sentiment_language == "en"
        assert settings.news_limit is None
        assert settings.cors_origins == ["http://localhost:3000"]
        assert settings.log_level == "INFO"
        assert settings.polygon_configured is False
        assert settings.sentiment_configured is False

    def test_reads_all_variables(self):
        from config import DashboardSettings

        settings = DashboardSettings.from_env({
            "POLYGON_API_KEY": "poly",
            "AZURE_API_KEY": "azure",
            "AZURE_ENDPOINT": "https://myres.cognitiveservices.azure.com/",
            "POLYGON_BASE_URL": "https://proxy.local/",
            "NEWS_LIMIT": "25",
            "CORS_ORIGINS": "http://a.test, http://b.test",
            "LOG_LEVEL": "debug",
        })

        assert settings.polygon_api_key == "poly"
        assert settings.azure_endpoint == "https://myres.cognitiveservices.azure.com"
        assert settings.polygon_base_url == "https://proxy.local"
        assert settings.news_limit == 25
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"
        assert settings.polygon_configured is True
        assert settings.sentiment_configured is True

    def test_empty_key_counts_as_missing(self):
        from config import DashboardSettings

        settings = DashboardSettings.from_env({"POLYGON_API_KEY": "", "AZURE_API_KEY": "k"})

        assert settings.polygon_api_key is None
        assert settings.sentiment_configured is False

    def test_settings_are_immutable(self):
        from pydantic import ValidationError
        from config import DashboardSettings

        settings = DashboardSettings.from_env({})

        with pytest.raises(ValidationError):
            settings.polygon_api_key = "changed"

    def test_load_settings_warns_on_missing_secrets(self, caplog):
        from config import load_settings

        with caplog.at_level("WARNING", logger="config"):
            load_settings({})

        assert "POLYGON_API_KEY" in caplog.text
        assert "AZURE_API_KEY" in caplog.text
