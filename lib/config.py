"""Server configuration loaded from the environment (and a local .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings shared by the proxy and the study assistant."""
    api_key: str
    host: str = "0.0.0.0"
    port: int = 8080
    static_dir: str = "dist"
    study_model: str = "gemini-2.5-flash"
    proxy_model: str = "gemini-pro"
    request_timeout: float = 60.0
    chat_session_limit: int = 1000
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        env_file: Optional path to a .env file (default: search from cwd)

    Returns:
        Populated Settings

    Raises:
        ConfigError: If API_KEY is not set or a numeric variable is malformed
    """
    load_dotenv(env_file)

    api_key = os.getenv("API_KEY")
    if not api_key:
        raise ConfigError("API_KEY environment variable is not set.")

    return Settings(
        api_key=api_key,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 8080),
        static_dir=os.getenv("STATIC_DIR", "dist"),
        study_model=os.getenv("STUDY_MODEL", "gemini-2.5-flash"),
        proxy_model=os.getenv("PROXY_MODEL", "gemini-pro"),
        request_timeout=_float_env("REQUEST_TIMEOUT", 60.0),
        chat_session_limit=_int_env("CHAT_SESSION_LIMIT", 1000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
