"""Configuration management for dnssync."""

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnssync.errors import ConfigMissingError

DEFAULT_CHECK_INTERVAL = 3600
DEFAULT_REQUEST_TIMEOUT = 30.0

FALSE_VALUES = {"false", "0", "no", "off"}

DEFAULT_IP_SERVICES = [
    "https://api.ipify.org?format=json",
    "https://ifconfig.me/all.json",
    "https://ipinfo.io/json",
]


class Settings(BaseSettings):
    """Environment variables for dnssync."""

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    # Cloudflare API token with Zone:Read and DNS:Edit permissions
    cloudflare_api_token: str | None = None

    # Comma-separated list, e.g. "example.com, *.example.com"
    monitored_domains: str | None = None

    check_interval: int = DEFAULT_CHECK_INTERVAL  # Seconds between checks
    debug: bool = False

    # Comma-separated public IP services, tried in order
    ip_services: str | None = None

    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @field_validator("check_interval", mode="before")
    @classmethod
    def fallback_check_interval(cls, v: Any) -> int:
        try:
            interval = int(v)
        except (TypeError, ValueError):
            return DEFAULT_CHECK_INTERVAL
        return interval if interval > 0 else DEFAULT_CHECK_INTERVAL

    @field_validator("request_timeout", mode="before")
    @classmethod
    def fallback_request_timeout(cls, v: Any) -> float:
        try:
            timeout = float(v)
        except (TypeError, ValueError):
            return DEFAULT_REQUEST_TIMEOUT
        return timeout if timeout > 0 else DEFAULT_REQUEST_TIMEOUT

    @field_validator("debug", mode="before")
    @classmethod
    def truthy_debug(cls, v: Any) -> bool:
        # Any value enables debug output unless it spells out "off"
        if isinstance(v, bool):
            return v
        value = str(v).strip().lower()
        return bool(value) and value not in FALSE_VALUES

    @property
    def ip_service_urls(self) -> list[str]:
        if not self.ip_services:
            return list(DEFAULT_IP_SERVICES)
        urls = [url.strip() for url in self.ip_services.split(",") if url.strip()]
        return urls or list(DEFAULT_IP_SERVICES)


def load_settings() -> Settings:
    """Load settings from .env and environment variables."""
    return Settings()


def require_settings(settings: Settings) -> None:
    """Ensure the required variables are present.

    Raises:
        ConfigMissingError: Naming the first missing variable.
    """
    if not settings.cloudflare_api_token:
        raise ConfigMissingError("CLOUDFLARE_API_TOKEN")
    if not settings.monitored_domains:
        raise ConfigMissingError("MONITORED_DOMAINS")


def split_domains(raw: str) -> tuple[list[str], int]:
    """Split a comma-separated domain list.

    Returns:
        The trimmed, non-empty entries in order and the number of empty
        entries that were dropped.
    """
    entries = [entry.strip() for entry in raw.split(",")]
    domains = [entry for entry in entries if entry]
    return domains, len(entries) - len(domains)


def format_interval(interval: int) -> str:
    """Format a number of seconds as e.g. "1h 30m"."""
    hours, remainder = divmod(interval, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or not parts:
        parts.append(f"{seconds}s")
    return " ".join(parts)
