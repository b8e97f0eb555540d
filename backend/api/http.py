from typing import Any, Dict, Optional
import httpx
from utils.retry import async_retry

@async_retry(exceptions=(httpx.TransportError,))
async def request_json(
    method: str,
    url: str,
    timeout: float,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
) -> Any:
    """One bounded HTTP call. Transport failures are retried; status errors are not."""
    async with httpx.AsyncClient(timeout=timeout) as client:
        r = await client.request(method, url, params=params, headers=headers, json=json_body)
        r.raise_for_status()
        return r.json()
