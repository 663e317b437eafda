"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedirectHandlerSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="REDIRECTHANDLER_",
    )

    # Redirect resolvers
    x_gbi_key: str | None = Field(
        default=None,
        description="License key sent to the resolvers as X-gbi-key (required)",
    )
    redirect_processor_urls: str | None = Field(
        default=None,
        description="Separated list of redirect resolver URLs (required)",
    )
    url_separator: str = Field(
        default=",",
        min_length=1,
        description="Separator used in redirect_processor_urls",
    )
    allow_local_urls: bool = Field(
        default=True,
        description="Accept loopback and local-network resolver hosts",
    )

    # Non-integer values degrade to the minimum instead of failing startup
    timeout: int | str | None = Field(
        default=1000,
        description="Resolver lookup timeout in ms (minimum 1000)",
    )

    # Fallback
    default_404_page: str | None = Field(
        default=None,
        description="Internal path served when no redirect is found (optional)",
    )

    # App settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
