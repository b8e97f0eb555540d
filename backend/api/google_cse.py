from typing import List
import httpx
from config import logger
from config.constants import API_TIMEOUTS, ENDPOINTS, FACT_CHECK_CONFIG
from exceptions import EvidenceSourceException
from models.evidence import EvidenceItem
from .http import request_json
from .records import to_evidence_items

SOURCE = "google_cse"

async def query_google_cse(query: str, api_key: str, cx: str) -> List[EvidenceItem]:
    """Google Custom Search JSON API. Needs both the key and the engine id."""
    params = {
        "key": api_key,
        "cx": cx,
        "q": query,
        "num": FACT_CHECK_CONFIG.MAX_SOURCES,
    }

    try:
        data = await request_json("GET", ENDPOINTS.GOOGLE_CSE, API_TIMEOUTS.GOOGLE_CSE, params=params)
    except httpx.HTTPStatusError as e:
        logger.error("Google CSE HTTP error %s: %s", e.response.status_code, e.response.text)
        raise EvidenceSourceException(SOURCE, f"HTTP {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error("Google CSE request error: %s", str(e))
        raise EvidenceSourceException(SOURCE, f"Request failed: {str(e)}")
    except ValueError as e:
        raise EvidenceSourceException(SOURCE, f"Malformed JSON: {str(e)}", recoverable=False)

    if not isinstance(data, dict):
        raise EvidenceSourceException(SOURCE, "Unexpected response shape", recoverable=False)

    # No "items" key means zero hits, not an error
    return to_evidence_items(data.get("items") or [])
