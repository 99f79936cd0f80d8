"""Application-wide configuration loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized environment configuration.

    Nothing here is validated at startup: missing Twilio values only fail when a
    token or call actually needs them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Twilio REST credentials
    twilio_account_sid: str | None = Field(default=None)
    twilio_auth_token: str | None = Field(default=None)
    twilio_phone_number: str | None = Field(default=None, description="E.164, e.g. +1555...")
    server_base_url: str | None = Field(
        default=None,
        description="Public base URL for Twilio webhooks (e.g. https://<ngrok>.ngrok-free.app).",
    )

    # Access token signing
    twilio_api_key: str | None = Field(default=None)
    twilio_api_secret: str | None = Field(default=None)
    twilio_twiml_app_sid: str | None = Field(
        default=None,
        description="TwiML application used for calls placed from the browser.",
    )
    token_ttl_seconds: int = Field(default=3600, gt=0)

    # Softphone
    browser_client_identity: str = Field(default="browser-client", min_length=1)
    outbound_greeting: str = Field(default="Hello from Twilio! This call is working correctly.")
    inbound_announcement: str = Field(default="You have an incoming call. Please hold.")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
