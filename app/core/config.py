"""
Application configuration using Pydantic Settings.

All configuration is read from environment variables (12-factor app),
with sensible defaults for local development. The Notion token and
database id have no usable default and must be supplied by the deployment.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central application configuration."""

    # Notion (upstream document database)
    notion_token: str = Field(
        default="",
        description="Secret integration token for the Notion API",
    )
    notion_database_id: str = Field(
        default="",
        description="Identifier of the Notion database backing the gallery",
    )
    notion_api_url: str = Field(
        default="https://api.notion.com/v1",
        description="Base URL of the Notion REST API",
    )
    notion_version: str = Field(
        default="2022-06-28",
        description="Value sent in the Notion-Version header",
    )

    # HTTP Client (for upstream queries)
    http_timeout: int = Field(
        default=30,
        description="Timeout in seconds for outbound HTTP requests",
    )
    upstream_page_size: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Records requested per upstream page (Notion caps at 100)",
    )
    max_upstream_pages: Optional[int] = Field(
        default=None,
        ge=1,
        description="Stop paging after this many upstream pages; unset means unbounded",
    )

    # Gallery pagination defaults
    default_page: int = Field(default=1, description="Page served when none is given")
    default_limit: int = Field(default=12, description="Items per page when none is given")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Application log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=8000, description="API bind port")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this throughout the app
settings = Settings()
