"""Server configuration and logging setup."""

import logging
import sys

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_ENDPOINT, APIConfiguration


class ServerConfig(BaseSettings):
    """Settings for the MCP server, read from ``TANA_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TANA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_token: SecretStr = Field(..., description="Tana Input API token")
    endpoint: str = Field(DEFAULT_ENDPOINT, description="Override for the addToNodeV2 URL")
    log_level: str = Field("INFO", description="Root logging level")

    def get_api_config(self) -> APIConfiguration:
        """Build the client configuration from these settings."""
        return APIConfiguration(
            api_token=self.api_token,
            endpoint=self.endpoint,
            debug=self.log_level.upper() == "DEBUG",
        )


def setup_logging(level: str | int = "INFO") -> None:
    """Send log records to stderr; stdout belongs to the MCP stdio transport."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    has_console = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root.handlers
    )
    if not has_console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
