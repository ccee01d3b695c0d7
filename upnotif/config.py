import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Tuple

from yarl import URL


URLS_VAR = "UPNOTIF_URLS"
WEBHOOK_VAR = "UPNOTIF_SLACK_WEBHOOK"
INTERVAL_VAR = "UPNOTIF_INTERVAL_SECONDS"

TEST_MODE_SENTINEL = "test"
DEFAULT_INTERVAL_SECONDS = 60


class ConfigError(RuntimeError):
    """Raised when the environment does not describe a usable monitor."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for environment-driven configuration, validated on creation."""

    urls: Tuple[str, ...] = field(default_factory=lambda: parse_urls(_require(URLS_VAR)))
    slack_webhook: str = field(default_factory=lambda: parse_webhook(_require(WEBHOOK_VAR)))
    interval_seconds: int = field(
        default_factory=lambda: parse_interval(
            os.getenv(INTERVAL_VAR, str(DEFAULT_INTERVAL_SECONDS))
        )
    )

    @property
    def test_mode(self) -> bool:
        return self.slack_webhook == TEST_MODE_SENTINEL


def _require(key: str) -> str:
    value = os.getenv(key)
    if value is None:
        raise ConfigError(f"{key} environment variable is required")
    return value


def is_valid_url(value: str) -> bool:
    try:
        url = URL(value)
    except (TypeError, ValueError):
        return False
    return url.is_absolute() and url.scheme in {"http", "https"} and bool(url.host)


def parse_urls(raw: str) -> Tuple[str, ...]:
    urls = tuple(part.strip() for part in raw.split(",") if part.strip())
    if not urls:
        raise ConfigError(f"At least one URL must be provided in {URLS_VAR}")
    for url in urls:
        if not is_valid_url(url):
            raise ConfigError(f"Invalid URL: {url}")
    return urls


def parse_webhook(raw: str) -> str:
    value = raw.strip()
    if value == TEST_MODE_SENTINEL:
        return value
    if not is_valid_url(value):
        raise ConfigError("Invalid Slack webhook URL")
    return value


def parse_interval(raw: str) -> int:
    try:
        seconds = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{INTERVAL_VAR} must be a valid number") from None
    if seconds <= 0:
        raise ConfigError(f"{INTERVAL_VAR} must be a positive number")
    return seconds


@lru_cache
def get_settings() -> Settings:
    return Settings()
