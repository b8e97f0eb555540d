from typing import List
import httpx
from config import logger
from config.constants import API_TIMEOUTS, ENDPOINTS, FACT_CHECK_CONFIG
from exceptions import EvidenceSourceException
from models.evidence import EvidenceItem
from .http import request_json
from .records import to_evidence_items

SOURCE = "serpapi"

async def query_serpapi(query: str, api_key: str) -> List[EvidenceItem]:
    """Google results through SerpAPI's `organic_results`."""
    params = {
        "api_key": api_key,
        "q": query,
        "engine": "google",
        "num": FACT_CHECK_CONFIG.MAX_SOURCES,
    }

    try:
        data = await request_json("GET", ENDPOINTS.SERPAPI, API_TIMEOUTS.SERPAPI, params=params)
    except httpx.HTTPStatusError as e:
        logger.error("SerpAPI HTTP error %s: %s", e.response.status_code, e.response.text)
        raise EvidenceSourceException(SOURCE, f"HTTP {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error("SerpAPI request error: %s", str(e))
        raise EvidenceSourceException(SOURCE, f"Request failed: {str(e)}")
    except ValueError as e:
        raise EvidenceSourceException(SOURCE, f"Malformed JSON: {str(e)}", recoverable=False)

    if not isinstance(data, dict):
        raise EvidenceSourceException(SOURCE, "Unexpected response shape", recoverable=False)

    return to_evidence_items(data.get("organic_results") or [])
