"""
Configuration module for the twilio-sms CLI.
Handles environment variables and application settings.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from twilio_sms.core.utils.exceptions import ConfigurationError


class TwilioSettings(BaseSettings):
    """Twilio account credentials and sending defaults."""

    account_sid: str | None = Field(
        default=None,
        description="Twilio Account SID",
        validation_alias=AliasChoices("TWILIO_SID", "TWILIO_ACCOUNT_SID", "account_sid"),
    )
    auth_token: str | None = Field(
        default=None,
        description="Twilio Auth Token",
        validation_alias=AliasChoices("TWILIO_TOKEN", "TWILIO_AUTH_TOKEN", "auth_token"),
    )
    default_number: str | None = Field(
        default=None,
        description="Default 'from' number (E.164)",
        validation_alias=AliasChoices(
            "TWILIO_DEFAULT_NUMBER", "TWILIO_PHONE_NUMBER", "default_number"
        ),
    )
    messaging_service_sid: str | None = Field(
        default=None,
        description="Default Messaging Service SID (recommended for A2P 10DLC)",
        validation_alias=AliasChoices(
            "TWILIO_MESSAGING_SERVICE_SID", "messaging_service_sid"
        ),
    )
    api_base_url: str = Field(
        default="https://api.twilio.com",
        description="Public API host used to build browsable media URLs",
    )

    model_config = SettingsConfigDict(
        env_prefix="TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore"
    )

    @field_validator(
        "account_sid", "auth_token", "default_number", "messaging_service_sid"
    )
    @classmethod
    def blank_as_missing(cls, v: str | None) -> str | None:
        # An exported-but-empty variable counts as unset
        if v is not None and not v.strip():
            return None
        return v

    def require_credentials(self) -> None:
        """
        Fail fast when the mandatory credentials are absent.

        Raises:
            ConfigurationError: naming the first missing variable
        """
        if not self.account_sid:
            raise ConfigurationError("Missing TWILIO_SID")
        if not self.auth_token:
            raise ConfigurationError("Missing TWILIO_TOKEN")


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="console", description="Log renderer (console, json)"
    )
    mask_pii: bool = Field(
        default=True, description="Redact phone numbers and emails in log events"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-settings
    twilio: TwilioSettings = Field(default_factory=TwilioSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Global settings instance
settings = Settings()
