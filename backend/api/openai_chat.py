import json
from typing import Any, Dict
import httpx
from config import logger
from config.constants import API_TIMEOUTS, ENDPOINTS, LLM_CONFIG
from exceptions import LLMException, ResponseParseException
from .http import request_json

SOURCE = "openai"

async def query_openai_json(system_prompt: str, user_prompt: str, api_key: str, model: str) -> Dict[str, Any]:
    """Chat completion in JSON-object mode; returns the decoded object."""
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    body = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        "response_format": {"type": "json_object"},
        "temperature": LLM_CONFIG.TEMPERATURE,
    }

    try:
        data = await request_json("POST", ENDPOINTS.OPENAI, API_TIMEOUTS.OPENAI, headers=headers, json_body=body)
    except httpx.HTTPStatusError as e:
        logger.error("OpenAI HTTP error %s for URL %s: %s", e.response.status_code, e.request.url, e.response.text)
        raise LLMException(SOURCE, f"HTTP {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error("OpenAI request error: %s", str(e))
        raise LLMException(SOURCE, f"Request failed: {str(e)}")
    except ValueError as e:
        raise ResponseParseException(SOURCE, f"Malformed JSON envelope: {str(e)}")

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error("Error parsing OpenAI response structure: %s. Response: %s", e, data)
        raise ResponseParseException(SOURCE, "Missing choices[0].message.content")

    try:
        parsed = json.loads(content)
    except (json.JSONDecodeError, TypeError) as e:
        raise ResponseParseException(SOURCE, f"Structured output is not JSON: {str(e)}")

    if not isinstance(parsed, dict):
        raise ResponseParseException(SOURCE, "Structured output is not a JSON object")
    return parsed
