"""
Configuration Settings

Client configuration loaded from environment variables (HATENABLOG_*)
or a .env file.
"""

from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .client import HatenaBlogClient
from .exceptions import ConfigurationError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HATENABLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Operator
    username: str = Field(
        default="",
        description="Hatena ID of the operator who owns or administers the blog"
    )
    apikey: SecretStr = Field(
        default=SecretStr(""),
        description="API key of the operator (see https://blog.hatena.ne.jp/-/config)"
    )

    # Target blog
    owner: Optional[str] = Field(
        default=None,
        description="Hatena ID of the blog owner; defaults to username"
    )
    blog_host: str = Field(
        default="",
        description="Domain or host part of the blog URL, e.g. staff.hatenablog.com"
    )

    # Endpoint overrides, mostly for testing against a local server
    hatenablog_host: Optional[str] = Field(
        default=None,
        description="API host; defaults to blog.hatena.ne.jp"
    )
    insecure: bool = Field(
        default=False,
        description="Use plain HTTP instead of HTTPS"
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def resolved_owner(self) -> str:
        return self.owner or self.username


def get_settings(**overrides) -> Settings:
    """Get settings, with explicit values taking precedence over the environment."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def build_client(settings: Settings, version: str) -> HatenaBlogClient:
    """Validate settings and construct a client from them."""
    if not settings.username:
        raise ConfigurationError("username is required")
    apikey = settings.apikey.get_secret_value()
    if not apikey:
        raise ConfigurationError("apikey is required")
    if not settings.blog_host:
        raise ConfigurationError("blog_host is required")

    client = HatenaBlogClient(
        version,
        settings.username,
        apikey,
        settings.resolved_owner,
        settings.blog_host,
        timeout=settings.timeout
    )
    if settings.hatenablog_host:
        client.set_hatenablog_host(settings.hatenablog_host)
    client.set_insecure(settings.insecure)
    return client
