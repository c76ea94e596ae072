from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

DEFAULT_MODEL = "Phi-4"
DEFAULT_SECRET_NAME = "phi4-api-key"
DEFAULT_IDLE_TIMEOUT = 1800


class ConfigurationError(RuntimeError):
    pass


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Keys use ``__`` as the section separator, so ``PHI4__ENDPOINT`` is the
    ``Phi4:Endpoint`` setting.
    """

    phi4_endpoint: Optional[str] = None
    phi4_model: str = DEFAULT_MODEL
    keyvault_uri: Optional[str] = None
    phi4_secret_name: str = DEFAULT_SECRET_NAME
    redis_url: Optional[str] = None
    session_secret_key: Optional[str] = None
    session_idle_timeout: int = DEFAULT_IDLE_TIMEOUT
    chat_history_limit: int = 0
    app_env: str = "development"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            phi4_endpoint=os.getenv("PHI4__ENDPOINT") or None,
            phi4_model=os.getenv("PHI4__MODEL") or DEFAULT_MODEL,
            keyvault_uri=os.getenv("KEYVAULT__URI") or None,
            phi4_secret_name=os.getenv("KEYVAULT__PHI4_SECRET_NAME") or DEFAULT_SECRET_NAME,
            redis_url=os.getenv("REDIS_URL") or None,
            session_secret_key=os.getenv("SESSION_SECRET_KEY") or None,
            session_idle_timeout=_int_env("SESSION_IDLE_TIMEOUT", DEFAULT_IDLE_TIMEOUT),
            chat_history_limit=_int_env("CHAT_HISTORY_LIMIT", 0),
            app_env=os.getenv("APP_ENV", "development"),
        )

    def validate(self) -> None:
        if not self.phi4_endpoint:
            raise ConfigurationError("PHI4__ENDPOINT configuration is required.")
        if not self.keyvault_uri:
            raise ConfigurationError("KEYVAULT__URI configuration is required.")
        if self.chat_history_limit < 0:
            raise ConfigurationError("CHAT_HISTORY_LIMIT must not be negative.")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
