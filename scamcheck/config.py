# scamcheck/config.py

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.anthropic.com"
MESSAGES_PATH = "/v1/messages"

MODEL = "claude-sonnet-4-20250514"
MAX_TOKENS = 1024
ANTHROPIC_VERSION = "2023-06-01"

# Input limits enforced before anything is sent upstream
MAX_TEXT_CHARS = 5000
MAX_IMAGE_BYTES = 10 * 1024 * 1024
ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")


@dataclass(frozen=True)
class ServiceConfig:
    """Credential + endpoint for the reasoning service. Passed by value into every call."""

    api_key: str
    base_url: Optional[str] = None

    @property
    def endpoint(self) -> str:
        base = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        return f"{base}{MESSAGES_PATH}"

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "ServiceConfig":
        key = api_key or os.getenv("ANTHROPIC_API_KEY") or os.getenv("ANTHROPIC_AUTH_TOKEN") or ""
        base_url = os.getenv("ANTHROPIC_BASE_URL") or None
        return cls(api_key=key.strip(), base_url=base_url)

    def __repr__(self) -> str:
        # never leak the key into logs / tracebacks
        return f"ServiceConfig(api_key='***', base_url={self.base_url!r})"
