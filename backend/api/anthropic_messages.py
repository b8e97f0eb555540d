import httpx
from config import logger
from config.constants import API_TIMEOUTS, ENDPOINTS, LLM_CONFIG
from exceptions import LLMException, ResponseParseException
from .http import request_json

SOURCE = "anthropic"

async def query_anthropic_text(prompt: str, api_key: str, model: str) -> str:
    """Single-turn Messages API call; returns the concatenated text blocks."""
    headers = {
        "x-api-key": api_key,
        "anthropic-version": LLM_CONFIG.ANTHROPIC_API_VERSION,
        "Content-Type": "application/json",
    }
    body = {
        "model": model,
        "max_tokens": LLM_CONFIG.ANTHROPIC_MAX_TOKENS,
        "messages": [{"role": "user", "content": prompt}],
    }

    try:
        data = await request_json("POST", ENDPOINTS.ANTHROPIC, API_TIMEOUTS.ANTHROPIC, headers=headers, json_body=body)
    except httpx.HTTPStatusError as e:
        logger.error("Anthropic HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text)
        raise LLMException(SOURCE, f"HTTP {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error("Anthropic request error: %s", str(e))
        raise LLMException(SOURCE, f"Request failed: {str(e)}")
    except ValueError as e:
        raise ResponseParseException(SOURCE, f"Malformed JSON envelope: {str(e)}")

    blocks = data.get("content") if isinstance(data, dict) else None
    if not isinstance(blocks, list):
        logger.error("Unexpected Anthropic response structure: %s", data)
        raise ResponseParseException(SOURCE, "Missing content blocks")

    text = "".join(
        block.get("text", "")
        for block in blocks
        if isinstance(block, dict) and block.get("type", "text") == "text"
    )
    return text
