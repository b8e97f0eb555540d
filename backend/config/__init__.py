import os
import logging

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("truthguard")

from .constants import (
    LLM_CONFIG,
    FACT_CHECK_CONFIG,
    API_TIMEOUTS,
    RETRY_CONFIG,
    ENDPOINTS,
)
from .settings import Settings, get_settings

OPTIONAL_KEYS = [
    "SERPAPI_KEY",
    "PERPLEXITY_API_KEY",
    "GOOGLE_API_KEY",
    "GOOGLE_CX",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
]

def check_api_keys_on_startup(settings: Settings = None):
    """Check for optional API keys on startup. None of them is required."""
    settings = settings or get_settings()
    missing_keys = [key_name for key_name in OPTIONAL_KEYS if not getattr(settings, key_name)]

    if len(missing_keys) == len(OPTIONAL_KEYS):
        logger.warning("No API keys configured. Running with offline evidence and heuristic reasoning.")
    elif missing_keys:
        logger.info(f"Unconfigured API keys: {', '.join(missing_keys)}")
    else:
        logger.info("All API keys are configured.")
    return missing_keys

__all__ = [
    "logger",
    "Settings",
    "get_settings",
    "check_api_keys_on_startup",
    "OPTIONAL_KEYS",
    "LLM_CONFIG",
    "FACT_CHECK_CONFIG",
    "API_TIMEOUTS",
    "RETRY_CONFIG",
    "ENDPOINTS",
]
