"""
Dashboard Configuration
API keys and endpoints injected into providers at startup
"""

import os
import logging
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_POLYGON_BASE_URL = "https://api.polygon.io"
DEFAULT_CORS_ORIGINS = "http://localhost:3000"


class DashboardSettings(BaseModel):
    """Secrets and endpoints for the reference-data and text-analytics services"""
    model_config = ConfigDict(frozen=True)

    polygon_api_key: Optional[str] = None
    polygon_base_url: str = DEFAULT_POLYGON_BASE_URL
    azure_api_key: Optional[str] = None
    azure_endpoint: Optional[str] = None
    sentiment_language: str = "en"
    news_limit: Optional[int] = Field(default=None, gt=0)
    cors_origins: List[str] = Field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    log_level: str = "INFO"

    @property
    def polygon_configured(self) -> bool:
        return bool(self.polygon_api_key)

    @property
    def sentiment_configured(self) -> bool:
        return bool(self.azure_api_key and self.azure_endpoint)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardSettings":
        """
        Build settings from environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            DashboardSettings instance
        """
        env = os.environ if environ is None else environ

        news_limit = env.get("NEWS_LIMIT")
        origins = env.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

        return cls(
            polygon_api_key=env.get("POLYGON_API_KEY") or None,
            polygon_base_url=(env.get("POLYGON_BASE_URL") or DEFAULT_POLYGON_BASE_URL).rstrip("/"),
            azure_api_key=env.get("AZURE_API_KEY") or None,
            azure_endpoint=(env.get("AZURE_ENDPOINT") or "").rstrip("/") or None,
            sentiment_language=env.get("SENTIMENT_LANGUAGE") or "en",
            news_limit=int(news_limit) if news_limit else None,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> DashboardSettings:
    """Load settings and warn about missing secrets"""
    settings = DashboardSettings.from_env(environ)

    if not settings.polygon_configured:
        logger.warning("POLYGON_API_KEY not set - reference data requests will fail")
    if not settings.sentiment_configured:
        logger.warning("AZURE_API_KEY/AZURE_ENDPOINT not set - news sentiment will be unavailable")

    return settings
