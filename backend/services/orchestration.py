import time
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from config import Settings, get_settings, logger
from config.constants import FACT_CHECK_CONFIG
from exceptions import ValidationException
from models.claims import FactCheckRequest
from models.evidence import EvidenceItem
from models.verdicts import FactCheckResult, Judgment, VerdictLabel
from utils.parsing import clamp, round_half_up, truncate
from .base import FailureHook, report_failure
from .evidence import EvidenceProvider
from .reasoning import ReasoningProvider

DEFAULT_METHODS = ["web_search", "llm_analysis"]

LOW_CONFIDENCE_SUMMARY = "This claim cannot be confidently verified with current public sources."
LOW_CONFIDENCE_EXPLANATION = "Insufficient evidence or conflicting information prevents a confident verdict."

PIPELINE_ERROR_SUMMARY = "Analysis failed due to an internal error or connectivity issue."
PIPELINE_ERROR_EXPLANATION = "This claim cannot be verified at this time. Please try again later."


def build_claim(request: FactCheckRequest) -> str:
    """Text wins over URL, URL over image URL."""
    text = (request.input_text or "").strip()
    if text:
        return text[:FACT_CHECK_CONFIG.MAX_CLAIM_LENGTH]

    if request.input_url:
        return f"Verify the content at this URL: {request.input_url}"

    if request.input_image_url:
        return (
            f"Verify claims made about this image: {request.input_image_url}. "
            "Check if the image is authentic and if any claims about it are accurate."
        )

    raise ValidationException(
        "input", "At least one of inputText, inputUrl, or inputImageUrl is required"
    )


def apply_override_policy(judgment: Judgment, evidence: List[EvidenceItem]) -> Judgment:
    """Force "unverified" when confidence is under the floor or there is no evidence."""
    if judgment.confidence < FACT_CHECK_CONFIG.CONFIDENCE_FLOOR or not evidence:
        return judgment.model_copy(update={
            "verdict": VerdictLabel.UNVERIFIED,
            "confidence": min(judgment.confidence, FACT_CHECK_CONFIG.OVERRIDE_CONFIDENCE_CAP),
            "summary": LOW_CONFIDENCE_SUMMARY,
            "explanation": LOW_CONFIDENCE_EXPLANATION,
        })
    return judgment


def shape_result(judgment: Judgment, evidence: List[EvidenceItem]) -> FactCheckResult:
    credibility = round_half_up(clamp(
        judgment.confidence,
        FACT_CHECK_CONFIG.MIN_CREDIBILITY,
        FACT_CHECK_CONFIG.MAX_CREDIBILITY,
    ))
    sources = [
        EvidenceItem(title=item.title, url=item.url, snippet=item.snippet)
        for item in evidence[:FACT_CHECK_CONFIG.MAX_SOURCES]
    ]
    return FactCheckResult(
        verdict=judgment.verdict,
        credibility=credibility,
        summary=judgment.summary or truncate(judgment.explanation, FACT_CHECK_CONFIG.SUMMARY_LENGTH),
        explanation=judgment.explanation,
        sources=sources,
        methods=list(judgment.methods) or list(DEFAULT_METHODS),
    )


def error_result() -> FactCheckResult:
    return FactCheckResult(
        verdict=VerdictLabel.UNVERIFIED,
        credibility=0,
        summary=PIPELINE_ERROR_SUMMARY,
        explanation=PIPELINE_ERROR_EXPLANATION,
        sources=[],
        methods=["error"],
    )


class FactCheckOrchestrator:
    """Claim -> evidence -> judgment -> override policy -> result. Never raises."""

    def __init__(
        self,
        evidence_provider: EvidenceProvider,
        reasoning_provider: ReasoningProvider,
        on_failure: Optional[FailureHook] = None,
    ):
        self.evidence_provider = evidence_provider
        self.reasoning_provider = reasoning_provider
        self.on_failure = on_failure

    @classmethod
    def from_settings(cls, settings: Settings, on_failure: Optional[FailureHook] = None) -> "FactCheckOrchestrator":
        return cls(
            evidence_provider=EvidenceProvider.from_settings(settings, on_failure=on_failure),
            reasoning_provider=ReasoningProvider.from_settings(settings, on_failure=on_failure),
            on_failure=on_failure,
        )

    def describe(self) -> Dict[str, str]:
        return {
            "evidence": self.evidence_provider.select_source().name,
            "reasoning": self.reasoning_provider.select_source().name,
        }

    async def run(self, request: Any) -> FactCheckResult:
        start_time = time.perf_counter()
        try:
            if isinstance(request, Mapping):
                request = FactCheckRequest.model_validate(request)

            claim = build_claim(request)
            evidence = await self.evidence_provider.fetch_evidence(claim)
            judgment = await self.reasoning_provider.judge(claim, evidence)
            final = apply_override_policy(judgment, evidence)
            if final is not judgment:
                logger.info(
                    "Override policy applied (confidence=%s, evidence=%d); verdict forced to unverified.",
                    judgment.confidence, len(evidence)
                )
            result = shape_result(final, evidence)
        except Exception as e:
            logger.exception("Unexpected error during fact-check.")
            report_failure(self.on_failure, "pipeline", "orchestrator", e)
            return error_result()

        duration = round(time.perf_counter() - start_time, 2)
        logger.info(
            f"Fact-check completed for claim '{claim[:50]}...' in {duration} seconds: "
            f"{result.verdict.value} ({result.credibility})."
        )
        return result


def build_orchestrator(settings: Optional[Settings] = None, on_failure: Optional[FailureHook] = None) -> FactCheckOrchestrator:
    """Wire providers from the current environment."""
    return FactCheckOrchestrator.from_settings(settings or get_settings(), on_failure=on_failure)
