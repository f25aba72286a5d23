"""Centralized access to runtime settings with safe fallbacks.

This module pulls values from ``config.py`` when available but gracefully
falls back to built-in defaults so the app can still boot if the config module
is missing or incomplete. A handful of values can be overridden through
environment variables for staging deployments.
"""
import os
from typing import Dict, Optional

# Built-in fallbacks so the UI can continue to run even if config.py is missing
# expected values.
CONFIG_ENDPOINT_FALLBACK = "https://yce.perfectcorp.com/service/V2/config/get-setting"
FETCH_TIMEOUT_SECONDS_FALLBACK: Optional[float] = None
LOG_LEVEL_FALLBACK = "INFO"
DEFAULT_PROMPT_MAX_LENGTH_FALLBACK = 600
REQUEST_PARAMS_FALLBACK: Dict[str, str] = {
    "locale": "en_US",
    "platform": "web",
    "product": "yce",
    "version": "1.0",
}

try:  # noqa: SIM105 - explicitly prefer ImportError handling for clarity
    import config as user_config
except ImportError:
    user_config = None


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


CONFIG_ENDPOINT: str = os.getenv("URL_BUILDER_CONFIG_ENDPOINT") or getattr(
    user_config, "CONFIG_ENDPOINT", CONFIG_ENDPOINT_FALLBACK
)
FETCH_TIMEOUT_SECONDS: Optional[float] = _env_float(
    "URL_BUILDER_FETCH_TIMEOUT",
    getattr(user_config, "FETCH_TIMEOUT_SECONDS", FETCH_TIMEOUT_SECONDS_FALLBACK),
)
LOG_LEVEL: str = os.getenv("URL_BUILDER_LOG_LEVEL") or getattr(
    user_config, "LOG_LEVEL", LOG_LEVEL_FALLBACK
)
DEFAULT_PROMPT_MAX_LENGTH: int = getattr(
    user_config, "DEFAULT_PROMPT_MAX_LENGTH", DEFAULT_PROMPT_MAX_LENGTH_FALLBACK
)
REQUEST_PARAMS: Dict[str, str] = getattr(
    user_config, "REQUEST_PARAMS", REQUEST_PARAMS_FALLBACK
)
