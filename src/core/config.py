"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Settings are built once at startup and handed to the components that
need them (the Gemini client receives its own reference); nothing reads
os.environ after get_settings() has run.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


DEFAULT_OFFICIAL_EMAIL = "jashanpreet1522.be23@chitkara.edu.in"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also write daily log files under logs/
        official_email: Operator email embedded in every response envelope
        gemini_api_key: API key for Google Gemini (empty string when unset)
        gemini_model: Gemini model used for single-word answers
        gemini_base_url: Base URL of the Generative Language REST API
        ai_timeout_seconds: Optional timeout for the Gemini call (None = wait forever)
        host: Interface the server binds to
        port: Port the server listens on
        enable_audit_logging: Whether the request audit middleware is installed
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool

    # Response envelope
    official_email: str

    # Gemini settings
    gemini_api_key: str
    gemini_model: str
    gemini_base_url: str
    ai_timeout_seconds: Optional[float]

    # Server settings
    host: str
    port: int
    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def has_gemini_key(self) -> bool:
        """Check whether a Gemini API key was configured."""
        return bool(self.gemini_api_key)


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_optional_float(key: str) -> Optional[float]:
    """Parse an optional float variable; empty or unset means None."""
    raw = os.environ.get(key, "").strip()
    if not raw:
        return None
    return float(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists. Call get_settings.cache_clear() to re-read the
    environment (tests do this after monkeypatching variables).

    The Gemini key is deliberately optional here. The service must
    start and answer the arithmetic operations without it; the AI
    client reports the missing key when it is actually asked a question.

    Returns:
        Settings instance with all configuration values
    """
    # GEMINI_KEY is the variable name older deployments used
    gemini_api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GEMINI_KEY", "")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "BFHLService"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_to_file=_get_env("LOG_TO_FILE", "true").lower() == "true",

        # Envelope
        official_email=_get_env("OFFICIAL_EMAIL", DEFAULT_OFFICIAL_EMAIL),

        # Gemini
        gemini_api_key=gemini_api_key.strip(),
        gemini_model=_get_env("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        gemini_base_url=_get_env("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL).rstrip("/"),
        ai_timeout_seconds=_get_optional_float("AI_TIMEOUT_SECONDS"),

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=int(_get_env("PORT", "3000")),
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",
    )
