from dataclasses import dataclass

@dataclass(frozen=True)
class LLMConfig:
    TEMPERATURE: float = 0.3
    ANTHROPIC_MAX_TOKENS: int = 2000
    ANTHROPIC_API_VERSION: str = "2023-06-01"

@dataclass(frozen=True)
class FactCheckConfig:
    MAX_CLAIM_LENGTH: int = 500
    MAX_SOURCES: int = 8
    MAX_CITATIONS: int = 5
    CITATION_REASON_LENGTH: int = 100
    SUMMARY_LENGTH: int = 200
    TITLE_CLAIM_LENGTH: int = 60

    # Override policy
    CONFIDENCE_FLOOR: float = 20.0
    OVERRIDE_CONFIDENCE_CAP: float = 25.0

    MIN_CREDIBILITY: int = 0
    MAX_CREDIBILITY: int = 100

@dataclass(frozen=True)
class APITimeouts:
    """Timeout configurations for external API calls."""
    SERPAPI: float = 10.0
    PERPLEXITY: float = 15.0
    GOOGLE_CSE: float = 10.0
    OPENAI: float = 30.0
    ANTHROPIC: float = 30.0

@dataclass(frozen=True)
class RetryConfig:
    MAX_ATTEMPTS: int = 2
    BASE_DELAY: float = 0.5
    MAX_DELAY: float = 2.0

@dataclass(frozen=True)
class Endpoints:
    SERPAPI: str = "https://serpapi.com/search.json"
    PERPLEXITY: str = "https://api.perplexity.ai/chat/completions"
    GOOGLE_CSE: str = "https://www.googleapis.com/customsearch/v1"
    OPENAI: str = "https://api.openai.com/v1/chat/completions"
    ANTHROPIC: str = "https://api.anthropic.com/v1/messages"

LLM_CONFIG = LLMConfig()
FACT_CHECK_CONFIG = FactCheckConfig()
API_TIMEOUTS = APITimeouts()
RETRY_CONFIG = RetryConfig()
ENDPOINTS = Endpoints()
