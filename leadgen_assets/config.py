"""Settings loaded from the environment (and .env)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

HAIKU_MODEL = "claude-haiku-4-5-20251001"
DEFAULT_TIMEOUT = 30.0
CONNECT_TIMEOUT = 5.0
DEFAULT_MAX_TOKENS = 2048


@dataclass(frozen=True)
class Settings:
    anthropic_api_key: str | None = None
    model: str = HAIKU_MODEL
    # Seconds. httpx read/write timeout for the backend call, so a stalled
    # reply fails; a reply that keeps streaming bytes is not cut off.
    timeout: float = DEFAULT_TIMEOUT
    max_tokens: int = DEFAULT_MAX_TOKENS

    @property
    def has_backend(self) -> bool:
        return bool(self.anthropic_api_key)


def load_settings() -> Settings:
    """Read settings from environment variables. Bad numbers fail fast with ValueError."""
    timeout = float(os.getenv("LEADGEN_TIMEOUT", DEFAULT_TIMEOUT))
    if timeout <= 0:
        raise ValueError(f"LEADGEN_TIMEOUT must be positive, got {timeout}")

    max_tokens = int(os.getenv("LEADGEN_MAX_TOKENS", DEFAULT_MAX_TOKENS))
    if max_tokens <= 0:
        raise ValueError(f"LEADGEN_MAX_TOKENS must be positive, got {max_tokens}")

    return Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
        model=os.getenv("LEADGEN_MODEL", HAIKU_MODEL),
        timeout=timeout,
        max_tokens=max_tokens,
    )
