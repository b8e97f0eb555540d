from typing import Any, Dict, List, Optional, Sequence

from api import query_openai_json, query_anthropic_text
from config import Settings, logger
from exceptions import ResponseParseException
from models.evidence import EvidenceCitation, EvidenceItem
from models.verdicts import Judgment, VerdictLabel, coerce_verdict
from prompts import (
    FACT_CHECK_SYSTEM_PROMPT,
    FACT_CHECK_USER_PROMPT,
    FREE_TEXT_FACT_CHECK_PROMPT,
    format_sources,
)
from utils.parsing import clamp, extract_json_block, parse_numeric_value
from .base import FailureHook, ReasoningSource, report_failure
from .heuristics import HeuristicReasoner

DEFAULT_SUMMARY = "Analysis completed"
ERROR_SUMMARY = "Analysis failed due to an internal error or connectivity issue."
ERROR_EXPLANATION = "This claim cannot be verified at this time due to technical limitations."


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _citations(entries: Any) -> List[EvidenceCitation]:
    if not isinstance(entries, list):
        return []
    citations = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        citations.append(EvidenceCitation(
            source_title=_as_text(entry.get("sourceTitle", entry.get("source_title"))),
            source_url=_as_text(entry.get("sourceUrl", entry.get("source_url"))),
            reason=_as_text(entry.get("reason")),
        ))
    return citations


def judgment_from_payload(payload: Dict[str, Any], methods: Sequence[str]) -> Judgment:
    """Shape an LLM's JSON answer into a Judgment, tolerating missing or odd fields."""
    raw_confidence = payload.get("credibility")
    if raw_confidence is None:
        raw_confidence = payload.get("confidence")
    confidence = parse_numeric_value(raw_confidence)
    summary = _as_text(payload.get("summary")) or DEFAULT_SUMMARY

    return Judgment(
        verdict=coerce_verdict(payload.get("verdict")),
        confidence=clamp(confidence if confidence is not None else 0.0, 0.0, 100.0),
        summary=summary,
        explanation=_as_text(payload.get("explanation")) or summary,
        evidence=_citations(payload.get("evidence")),
        methods=list(methods),
    )


def error_judgment(exc: BaseException) -> Judgment:
    return Judgment(
        verdict=VerdictLabel.UNVERIFIED,
        confidence=0,
        summary=ERROR_SUMMARY,
        explanation=ERROR_EXPLANATION,
        evidence=[],
        methods=["error_fallback"],
        error=f"{type(exc).__name__}: {exc}",
    )


class OpenAIReasoningSource(ReasoningSource):
    """Structured output: the model is forced to answer with a JSON object."""

    name = "openai"
    methods = ("web_search", "openai_llm")

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def judge(self, claim: str, evidence: List[EvidenceItem]) -> Optional[Judgment]:
        user_prompt = FACT_CHECK_USER_PROMPT.format(claim=claim, sources=format_sources(evidence))
        payload = await query_openai_json(FACT_CHECK_SYSTEM_PROMPT, user_prompt, self.api_key, self.model)
        return judgment_from_payload(payload, self.methods)


class AnthropicReasoningSource(ReasoningSource):
    """Free-text answer; the JSON object is located inside the reply."""

    name = "anthropic"
    methods = ("web_search", "anthropic_claude")

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def judge(self, claim: str, evidence: List[EvidenceItem]) -> Optional[Judgment]:
        prompt = FREE_TEXT_FACT_CHECK_PROMPT.format(
            claim=claim, sources=format_sources(evidence, inline_url=True)
        )
        text = await query_anthropic_text(prompt, self.api_key, self.model)
        try:
            payload = extract_json_block(text)
        except ValueError as e:
            raise ResponseParseException(self.name, f"Unparseable JSON in reply: {str(e)}")
        if payload is None:
            logger.warning("No JSON object found in %s reply; declining.", self.name)
            return None
        return judgment_from_payload(payload, self.methods)


class ReasoningProvider:
    """First configured source judges; a declining source passes to the next, ending at the heuristic."""

    def __init__(
        self,
        sources: Sequence[ReasoningSource],
        fallback: Optional[ReasoningSource] = None,
        on_failure: Optional[FailureHook] = None,
    ):
        self.sources = list(sources)
        self.fallback = fallback or HeuristicReasoner()
        self.on_failure = on_failure

    @classmethod
    def from_settings(cls, settings: Settings, on_failure: Optional[FailureHook] = None) -> "ReasoningProvider":
        return cls(
            sources=[
                OpenAIReasoningSource(settings.OPENAI_API_KEY, settings.OPENAI_MODEL),
                AnthropicReasoningSource(settings.ANTHROPIC_API_KEY, settings.ANTHROPIC_MODEL),
            ],
            fallback=HeuristicReasoner(delay=settings.HEURISTIC_DELAY),
            on_failure=on_failure,
        )

    def select_source(self) -> ReasoningSource:
        for source in self.sources:
            if source.is_configured():
                return source
        return self.fallback

    async def judge(self, claim: str, evidence: List[EvidenceItem]) -> Judgment:
        source_name = "unknown"
        try:
            for source in self.sources:
                if not source.is_configured():
                    continue
                source_name = source.name
                judgment = await source.judge(claim, evidence)
                if judgment is not None:
                    return judgment

            source_name = self.fallback.name
            judgment = await self.fallback.judge(claim, evidence)
            if judgment is None:
                raise RuntimeError(f"Fallback reasoner {source_name} returned no judgment")
            return judgment
        except Exception as e:
            logger.error("Reasoning via %s failed: %s", source_name, e)
            report_failure(self.on_failure, "reasoning", source_name, e)
            return error_judgment(e)
