from typing import Any, Dict, List
import httpx
from config import logger
from config.constants import API_TIMEOUTS, ENDPOINTS, FACT_CHECK_CONFIG
from exceptions import EvidenceSourceException
from models.evidence import EvidenceItem
from prompts import EVIDENCE_SEARCH_SYSTEM_PROMPT, EVIDENCE_SEARCH_PROMPT
from .http import request_json
from .records import to_evidence_items

SOURCE = "perplexity"
CITATION_SNIPPET = "Cited source for verification"

def citations_to_evidence(data: Dict[str, Any]) -> List[EvidenceItem]:
    """Prefer structured `search_results`; fall back to the bare `citations` URL list."""
    search_results = data.get("search_results")
    if isinstance(search_results, list) and search_results:
        return to_evidence_items(search_results, url_key="url")

    citations = data.get("citations") or []
    if not isinstance(citations, list):
        return []

    items = []
    for cite in citations:
        if not isinstance(cite, str) or not cite:
            continue
        items.append(EvidenceItem(
            title=f"Source {len(items) + 1}",
            url=cite,
            snippet=CITATION_SNIPPET,
        ))
        if len(items) >= FACT_CHECK_CONFIG.MAX_SOURCES:
            break
    return items

async def query_perplexity(query: str, api_key: str, model: str) -> List[EvidenceItem]:
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    body = {
        "model": model,
        "messages": [
            {"role": "system", "content": EVIDENCE_SEARCH_SYSTEM_PROMPT},
            {"role": "user", "content": EVIDENCE_SEARCH_PROMPT.format(claim=query)},
        ],
    }

    try:
        data = await request_json(
            "POST", ENDPOINTS.PERPLEXITY, API_TIMEOUTS.PERPLEXITY, headers=headers, json_body=body
        )
    except httpx.HTTPStatusError as e:
        logger.error("Perplexity HTTP error %s: %s", e.response.status_code, e.response.text)
        raise EvidenceSourceException(SOURCE, f"HTTP {e.response.status_code}")
    except httpx.RequestError as e:
        logger.error("Perplexity request error: %s", str(e))
        raise EvidenceSourceException(SOURCE, f"Request failed: {str(e)}")
    except ValueError as e:
        raise EvidenceSourceException(SOURCE, f"Malformed JSON: {str(e)}", recoverable=False)

    if not isinstance(data, dict):
        raise EvidenceSourceException(SOURCE, "Unexpected response shape", recoverable=False)

    return citations_to_evidence(data)
