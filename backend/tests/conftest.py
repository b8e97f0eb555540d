import pytest
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

API_KEY_VARS = [
    "SERPAPI_KEY",
    "PERPLEXITY_API_KEY",
    "GOOGLE_API_KEY",
    "GOOGLE_CX",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
]


@pytest.fixture(autouse=True)
def offline_env(monkeypatch):
    """No capability configured and no artificial latency, unless a test opts in."""
    for key in API_KEY_VARS:
        # Blank rather than unset so a stray .env file cannot leak keys in
        monkeypatch.setenv(key, "")
    monkeypatch.setenv("OFFLINE_EVIDENCE_DELAY", "0")
    monkeypatch.setenv("HEURISTIC_DELAY", "0")


@pytest.fixture
def no_retry_sleep(monkeypatch):
    """Skip the backoff between transport retries."""
    sleep = AsyncMock()
    monkeypatch.setattr("utils.retry.asyncio.sleep", sleep)
    return sleep


@pytest.fixture
def test_client():
    """Create a TestClient for FastAPI app."""
    import main
    return TestClient(main.app)


@pytest.fixture
def mock_httpx_client():
    """Build an httpx.AsyncClient stand-in whose request() returns `payload` or raises `error`."""
    def factory(payload=None, error=None):
        mock_client = MagicMock()
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = payload
        mock_response.raise_for_status = MagicMock()

        if error is not None:
            mock_client.request = AsyncMock(side_effect=error)
        else:
            mock_client.request = AsyncMock(return_value=mock_response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        return mock_client
    return factory


@pytest.fixture
def http_status_error():
    """An httpx.HTTPStatusError for the given status code."""
    from httpx import HTTPStatusError, Request, Response

    def factory(status_code=500):
        request = Request("GET", "https://vendor.test/endpoint")
        response = Response(status_code, request=request, text="upstream error")
        return HTTPStatusError("Error", request=request, response=response)
    return factory


@pytest.fixture
def sample_serpapi_response():
    return {
        "search_metadata": {"status": "Success"},
        "organic_results": [
            {
                "position": i + 1,
                "title": f"Result {i + 1}",
                "link": f"https://news.test/article-{i + 1}",
                "snippet": f"Snippet number {i + 1}.",
            }
            for i in range(10)
        ],
    }


@pytest.fixture
def sample_perplexity_response():
    return {
        "id": "cmpl-1",
        "model": "sonar",
        "citations": [
            "https://www.who.int/news/item/1",
            "https://www.nature.com/articles/2",
        ],
        "choices": [{"message": {"role": "assistant", "content": "Here are sources."}}],
    }


@pytest.fixture
def sample_google_cse_response():
    return {
        "kind": "customsearch#search",
        "items": [
            {
                "title": "Snopes: Vaccine study",
                "link": "https://www.snopes.com/fact-check/vaccine-study/",
                "snippet": "The claim was debunked by researchers.",
            },
            {
                "title": "Reuters Fact Check",
                "link": "https://www.reuters.com/fact-check/1",
            },
        ],
    }


@pytest.fixture
def sample_openai_response():
    return {
        "id": "chatcmpl-1",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": (
                        '{"verdict": "mostly_true", "credibility": 82, '
                        '"summary": "Largely supported.", '
                        '"explanation": "Two independent sources agree.", '
                        '"evidence": [{"sourceTitle": "WHO", "sourceUrl": "https://www.who.int/x", '
                        '"reason": "Official statement."}]}'
                    ),
                },
            }
        ],
    }


@pytest.fixture
def sample_anthropic_response():
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "content": [
            {
                "type": "text",
                "text": (
                    "Here is my analysis:\n"
                    '{"verdict": "false", "credibility": 88, "summary": "The claim is false.", '
                    '"explanation": "Sources {1} and {2} contradict it.", "evidence": []}\n'
                    "Let me know if you need more."
                ),
            }
        ],
    }
