"""Simplified configuration management for the Zentral SDK."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class ZentralConfig(BaseModel):
    """Unified configuration for the Zentral SDK."""

    model_config = ConfigDict(frozen=True)

    # API endpoint and authentication
    base_url: str = Field(default="")
    token: str = Field(default="")

    # Request settings
    user_agent: Optional[str] = Field(default=None)
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = Field(default=None, gt=0)

    @classmethod
    def from_environment(cls) -> "ZentralConfig":
        """Create configuration from environment variables.

        Reads ``ZTL_API_BASE_URL``, ``ZTL_API_TOKEN``, ``ZTL_USER_AGENT``,
        ``ZTL_TIMEOUT`` and ``ZTL_EXTRA_HEADERS``. Extra headers are given as
        ``Name: value`` pairs separated by ``;``.
        """
        config_data = {
            "base_url": _get_env_var(["ZTL_API_BASE_URL", "ZENTRAL_API_BASE_URL"], ""),
            "token": _get_env_var(["ZTL_API_TOKEN", "ZENTRAL_API_TOKEN"], ""),
            "user_agent": os.getenv("ZTL_USER_AGENT") or None,
            "headers": _parse_headers(os.getenv("ZTL_EXTRA_HEADERS", "")),
            "timeout": os.getenv("ZTL_TIMEOUT") or None,
        }
        return cls(**config_data)


def _get_env_var(keys: list[str], default: str = "") -> str:
    """Get first available environment variable from a list of keys."""
    for key in keys:
        if value := os.getenv(key):
            return value
    return default


def _parse_headers(value: str) -> dict[str, str]:
    """Parse ``Name: value; Other: value`` into a header mapping."""
    headers = {}
    for item in value.split(";"):
        if not item.strip():
            continue
        name, sep, header_value = item.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header {item.strip()!r}, expected 'Name: value'")
        headers[name.strip()] = header_value.strip()
    return headers


# Global configuration instance
_config: Optional[ZentralConfig] = None


def get_config(*, reload: bool = False) -> ZentralConfig:
    """Get the global configuration instance."""
    global _config

    if _config is None or reload:
        _config = ZentralConfig.from_environment()

    return _config


def load_dotenv_for_sdk(path: Optional[Path] = None, *, override: bool = False) -> None:
    """Load environment variables from a .env file.

    Without a path, ``.env.<ZTL_ENV>`` is used if ``ZTL_ENV`` is set and the
    file exists, then ``.env`` in the current directory.
    """
    if path is None:
        path = Path.cwd() / ".env"
        if env_mode := os.getenv("ZTL_ENV"):
            env_path = Path.cwd() / f".env.{env_mode.lower()}"
            if env_path.exists():
                path = env_path

    if path.exists():
        load_dotenv(path, override=override)
