from .serpapi import query_serpapi
from .perplexity import query_perplexity
from .google_cse import query_google_cse
from .openai_chat import query_openai_json
from .anthropic_messages import query_anthropic_text

__all__ = [
    "query_serpapi",
    "query_perplexity",
    "query_google_cse",
    "query_openai_json",
    "query_anthropic_text",
]
