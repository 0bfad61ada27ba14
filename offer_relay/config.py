from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from offer_relay.utils.logging import get_logger

logger = get_logger("config")

WEBHOOK_URL_ENV = "N8N_WEBHOOK_URL"
WEBHOOK_URL_PLACEHOLDER = "https://your-n8n-url/webhook/offer-letter"

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def resolve_env_path() -> Path:
    """Return the `.env` file used to seed the process environment."""

    override = os.getenv("ENV_PATH")
    if override:
        return Path(override).expanduser()
    return _PROJECT_ROOT / ".env"


_ENV_PATH = resolve_env_path()

if _ENV_PATH.exists():
    load_dotenv(str(_ENV_PATH))
    logger.info("Loaded environment variables from file", extra={"path": str(_ENV_PATH)})
else:
    logger.warning(
        ".env file is missing; relying on existing environment variables",
        extra={"path": str(_ENV_PATH)},
    )


def _normalise_webhook_url(value: str | None) -> str | None:
    if not value:
        return None

    candidate = value.strip()
    if not candidate or candidate == WEBHOOK_URL_PLACEHOLDER:
        return None
    return candidate


@dataclass(frozen=True, slots=True)
class RelaySettings:
    """Per-request view of the relay configuration."""

    webhook_url: str | None = None

    @classmethod
    def from_env(cls) -> "RelaySettings":
        return cls(webhook_url=_normalise_webhook_url(os.getenv(WEBHOOK_URL_ENV)))

    @property
    def webhook_configured(self) -> bool:
        return self.webhook_url is not None


def get_settings() -> RelaySettings:
    """FastAPI dependency returning settings read at request time."""

    return RelaySettings.from_env()


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS")
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


__all__ = [
    "RelaySettings",
    "WEBHOOK_URL_ENV",
    "WEBHOOK_URL_PLACEHOLDER",
    "cors_origins",
    "get_settings",
    "resolve_env_path",
]
