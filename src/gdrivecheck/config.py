"""Process configuration for gdrivecheck.

Settings are read from environment variables (and an optional `.env` file)
once at startup and then passed explicitly to the components that need them.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gdrivecheck.auth import AuthInfo
from gdrivecheck.errors import ConfigError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Field names double as (case-insensitive) environment variable names.
    google_drive_api_key: str
    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    log_level: str = DEFAULT_LOG_LEVEL
    supports_all_drives: bool = True

    @field_validator("google_drive_api_key")
    @classmethod
    def _api_key_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("GOOGLE_DRIVE_API_KEY must not be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    def auth_info(self) -> AuthInfo:
        return AuthInfo.from_api_key(self.google_drive_api_key)


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ConfigError: if GOOGLE_DRIVE_API_KEY is missing/blank or a value is invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = [".".join(str(p) for p in err.get("loc", ())).upper() for err in exc.errors()]
        raise ConfigError(
            "Invalid configuration: " + ", ".join(f for f in fields if f),
            details={"errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc
