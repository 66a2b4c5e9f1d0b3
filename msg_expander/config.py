"""Configuration loaded from the environment (and .env)."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from msg_expander.domain.errors import ConfigError

load_dotenv()

DEFAULT_STATUS_TEXT = "message links"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class ExpanderConfig:
    """Typed runtime configuration."""

    token: str = ""
    # 0 = one task per message with no cap
    max_concurrency: int = 0
    status_text: str = DEFAULT_STATUS_TEXT

    @classmethod
    def from_env(cls) -> "ExpanderConfig":
        """Create ExpanderConfig from environment variables.

        Raises ConfigError if DISCORD_TOKEN is missing or a value is invalid.
        """
        token = os.getenv("DISCORD_TOKEN", "").strip()
        if not token:
            raise ConfigError("DISCORD_TOKEN is not set")

        max_concurrency = _int_env("EXPANDER_MAX_CONCURRENCY", 0)
        if max_concurrency < 0:
            raise ConfigError(
                f"EXPANDER_MAX_CONCURRENCY must be >= 0, got {max_concurrency}"
            )

        return cls(
            token=token,
            max_concurrency=max_concurrency,
            status_text=os.getenv("EXPANDER_STATUS", "").strip() or DEFAULT_STATUS_TEXT,
        )
