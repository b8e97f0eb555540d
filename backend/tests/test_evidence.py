import pytest
import httpx
from typing import List
from unittest.mock import MagicMock, patch

from config import get_settings
from exceptions import EvidenceSourceException
from models import EvidenceItem
from services.base import EvidenceSource
from services.evidence import (
    EvidenceProvider,
    GoogleCustomSearchSource,
    OfflineEvidenceSource,
    PerplexitySource,
    SerpApiSource,
    offline_evidence,
)


class FakeSource(EvidenceSource):
    def __init__(self, name, configured=True, items=None, error=None):
        self.name = name
        self.configured = configured
        self.items = items or []
        self.error = error
        self.calls: List[str] = []

    def is_configured(self) -> bool:
        return self.configured

    async def search(self, claim: str) -> List[EvidenceItem]:
        self.calls.append(claim)
        if self.error is not None:
            raise self.error
        return self.items


def _items(count, prefix="item"):
    return [EvidenceItem(title=f"{prefix} {i}", url=f"https://{prefix}.test/{i}", snippet="s") for i in range(count)]


class TestOfflineEvidence:
    def test_three_fixed_items(self):
        items = offline_evidence("The moon is made of cheese")
        assert len(items) == 3
        assert items[0].title == "Fact Check: The moon is made of cheese"
        assert items[1].title.startswith("Verification Report: ")
        assert items[2].title.startswith("Analysis: ")
        assert [i.url for i in items] == [
            "https://example-factcheck.org/article1",
            "https://verified-news.org/report",
            "https://fact-check.org/analysis",
        ]

    def test_claim_prefix_in_titles(self):
        claim = "x" * 200
        items = offline_evidence(claim)
        assert items[0].title == "Fact Check: " + "x" * 60

    def test_deterministic(self):
        assert offline_evidence("same claim") == offline_evidence("same claim")


class TestSourceConfiguration:
    def test_key_presence(self):
        assert SerpApiSource("k").is_configured()
        assert not SerpApiSource(None).is_configured()
        assert not SerpApiSource("").is_configured()
        assert PerplexitySource("k", "sonar").is_configured()

    def test_google_needs_key_and_cx(self):
        assert GoogleCustomSearchSource("k", "cx").is_configured()
        assert not GoogleCustomSearchSource("k", None).is_configured()
        assert not GoogleCustomSearchSource(None, "cx").is_configured()

    def test_offline_always_configured(self):
        assert OfflineEvidenceSource(delay=0).is_configured()


@pytest.mark.asyncio
class TestEvidenceProvider:
    async def test_first_configured_source_wins(self):
        a = FakeSource("a", configured=False, items=_items(1, "a"))
        b = FakeSource("b", items=_items(2, "b"))
        c = FakeSource("c", items=_items(3, "c"))
        provider = EvidenceProvider([a, b, c], fallback=FakeSource("fallback"))

        result = await provider.fetch_evidence("claim")

        assert [i.title for i in result] == ["b 0", "b 1"]
        assert a.calls == [] and c.calls == []
        assert b.calls == ["claim"]

    async def test_fallback_when_nothing_configured(self):
        provider = EvidenceProvider(
            [FakeSource("a", configured=False)],
            fallback=OfflineEvidenceSource(delay=0),
        )
        result = await provider.fetch_evidence("Water boils at 100C")
        assert result == offline_evidence("Water boils at 100C")

    async def test_selection_happens_per_call(self):
        a = FakeSource("a", configured=False, items=_items(1, "a"))
        provider = EvidenceProvider([a], fallback=FakeSource("fallback", items=_items(1, "f")))

        assert (await provider.fetch_evidence("claim"))[0].title == "f 0"
        a.configured = True
        assert (await provider.fetch_evidence("claim"))[0].title == "a 0"

    async def test_failure_yields_empty_list_and_reports(self):
        hook = MagicMock()
        error = EvidenceSourceException("b", "HTTP 500")
        b = FakeSource("b", error=error)
        c = FakeSource("c", items=_items(2))
        provider = EvidenceProvider([b, c], on_failure=hook)

        result = await provider.fetch_evidence("claim")

        assert result == []
        # no fall-through to the next source
        assert c.calls == []
        hook.assert_called_once_with("evidence", "b", error)

    async def test_raising_hook_does_not_escape(self):
        hook = MagicMock(side_effect=RuntimeError("hook broke"))
        provider = EvidenceProvider([FakeSource("a", error=ValueError("bad"))], on_failure=hook)

        assert await provider.fetch_evidence("claim") == []
        hook.assert_called_once()

    async def test_truncates_to_eight(self):
        provider = EvidenceProvider([FakeSource("a", items=_items(12))])
        result = await provider.fetch_evidence("claim")
        assert len(result) == 8
        assert result[0].title == "item 0"
        assert result[-1].title == "item 7"

    async def test_offline_delay_is_awaited(self, monkeypatch):
        sleeps = []

        async def fake_sleep(delay):
            sleeps.append(delay)

        monkeypatch.setattr("services.evidence.asyncio.sleep", fake_sleep)
        result = await OfflineEvidenceSource(delay=0.5).search("claim")

        assert sleeps == [0.5]
        assert len(result) == 3


@pytest.mark.asyncio
class TestEvidenceProviderFromSettings:
    async def test_priority_order(self, monkeypatch):
        monkeypatch.setenv("PERPLEXITY_API_KEY", "pplx")
        monkeypatch.setenv("GOOGLE_API_KEY", "g")
        monkeypatch.setenv("GOOGLE_CX", "cx")
        provider = EvidenceProvider.from_settings(get_settings())
        assert provider.select_source().name == "perplexity"

        monkeypatch.setenv("SERPAPI_KEY", "serp")
        provider = EvidenceProvider.from_settings(get_settings())
        assert provider.select_source().name == "serpapi"

    async def test_google_only_with_cx(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_API_KEY", "g")
        provider = EvidenceProvider.from_settings(get_settings())
        assert provider.select_source().name == "offline"

        monkeypatch.setenv("GOOGLE_CX", "cx")
        provider = EvidenceProvider.from_settings(get_settings())
        assert provider.select_source().name == "google_cse"

    async def test_network_failure_never_raises(self, monkeypatch, mock_httpx_client, no_retry_sleep):
        monkeypatch.setenv("SERPAPI_KEY", "serp")
        provider = EvidenceProvider.from_settings(get_settings())

        client = mock_httpx_client(error=httpx.ConnectError("unreachable"))
        with patch("api.http.httpx.AsyncClient", return_value=client):
            result = await provider.fetch_evidence("claim")

        assert result == []

    async def test_serpapi_results_flow_through(self, monkeypatch, mock_httpx_client, sample_serpapi_response):
        monkeypatch.setenv("SERPAPI_KEY", "serp")
        provider = EvidenceProvider.from_settings(get_settings())

        with patch("api.http.httpx.AsyncClient", return_value=mock_httpx_client(sample_serpapi_response)):
            result = await provider.fetch_evidence("claim")

        assert len(result) == 8
        assert result[0].url == "https://news.test/article-1"
