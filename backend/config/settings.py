from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # Evidence capabilities, in priority order
    SERPAPI_KEY: Optional[str] = None
    PERPLEXITY_API_KEY: Optional[str] = None
    GOOGLE_API_KEY: Optional[str] = None
    GOOGLE_CX: Optional[str] = None

    # Reasoning capabilities, in priority order
    OPENAI_API_KEY: Optional[str] = None
    ANTHROPIC_API_KEY: Optional[str] = None

    PERPLEXITY_MODEL: str = "sonar"
    OPENAI_MODEL: str = "gpt-4o-mini"
    ANTHROPIC_MODEL: str = "claude-3-5-sonnet-20241022"

    OFFLINE_EVIDENCE_DELAY: float = 0.5
    HEURISTIC_DELAY: float = 0.8

    LOG_LEVEL: str = "INFO"

    @field_validator(
        "SERPAPI_KEY",
        "PERPLEXITY_API_KEY",
        "GOOGLE_API_KEY",
        "GOOGLE_CX",
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        mode="before",
    )
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

def get_settings() -> Settings:
    """Read the environment again; capability selection follows the current configuration."""
    return Settings()
