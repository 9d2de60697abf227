"""Runtime configuration.

Centralises environment variables (pydantic-settings) so that the CLI
and the transport read configuration the same way.  Every field can be
set through a ``PIHOLE_*`` environment variable or a local ``.env``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pihole_domains.exceptions import ConfigError

DEFAULT_PASSWORD_FILE = Path("/etc/pihole/cli_pw")


class Settings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PIHOLE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default="http://localhost/api",
        min_length=8,
        description="Base URL of the Pi-hole REST API.",
    )
    password: SecretStr | None = Field(
        default=None,
        description="Web interface or app password.",
    )
    password_file: Path = Field(
        default=DEFAULT_PASSWORD_FILE,
        description="CLI app-password file, used when readable.",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify HTTPS certificates.",
    )
    debug: bool = Field(
        default=False,
        description="Emit DEBUG-level logs on stderr.",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines instead of console output.",
    )


def load_settings(**overrides: object) -> Settings:
    """Build :class:`Settings`, mapping validation failures to :class:`ConfigError`."""
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        fields = ", ".join(
            "PIHOLE_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        raise ConfigError(
            f"Invalid configuration: {fields or exc}",
            hint="Check the PIHOLE_* environment variables and your .env file.",
        ) from exc
