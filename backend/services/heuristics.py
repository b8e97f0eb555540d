import asyncio
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config.constants import FACT_CHECK_CONFIG
from models.evidence import EvidenceCitation, EvidenceItem
from models.verdicts import Judgment, VerdictLabel
from utils.parsing import truncate
from .base import ReasoningSource

UNVERIFIABLE_EXPLANATION = "This claim cannot be confidently verified with current public sources."
NO_SOURCES_SUMMARY = "Not yet confirmed - insufficient sources available."

@dataclass(frozen=True)
class HeuristicRule:
    name: str
    target: str  # "evidence" (joined snippets) or "claim"
    keywords: Tuple[str, ...]
    verdict: VerdictLabel
    confidence: float
    explanation: str

    def matches(self, evidence_text: str, claim_text: str) -> bool:
        haystack = evidence_text if self.target == "evidence" else claim_text
        return any(keyword in haystack for keyword in self.keywords)

# Evaluated top to bottom; first match wins.
HEURISTIC_RULES: Tuple[HeuristicRule, ...] = (
    HeuristicRule(
        name="debunked",
        target="evidence",
        keywords=("debunk", "false", "misleading", "hoax"),
        verdict=VerdictLabel.FALSE,
        confidence=75,
        explanation="Multiple sources indicate this claim is false or misleading.",
    ),
    HeuristicRule(
        name="verified",
        target="evidence",
        keywords=("verified", "confirm", "accurate", "true"),
        verdict=VerdictLabel.TRUE,
        confidence=80,
        explanation="This claim has been verified by multiple reputable sources.",
    ),
    HeuristicRule(
        name="mixed",
        target="evidence",
        keywords=("partially", "mixed", "unclear"),
        verdict=VerdictLabel.MIXED,
        confidence=50,
        explanation="Evidence is mixed - some aspects may be true while others are not.",
    ),
    HeuristicRule(
        name="scientific",
        target="claim",
        keywords=("scientists", "research", "study", "published"),
        verdict=VerdictLabel.MOSTLY_TRUE,
        confidence=70,
        explanation="This appears to be a scientific claim with credible backing from sources.",
    ),
    HeuristicRule(
        name="sensational",
        target="claim",
        keywords=("cure", "miracle", "shocking", "secret"),
        verdict=VerdictLabel.MOSTLY_FALSE,
        confidence=30,
        explanation="Sensational claims like this are often false or exaggerated, and sources do not support it.",
    ),
)

DEFAULT_RULE = HeuristicRule(
    name="default",
    target="claim",
    keywords=(),
    verdict=VerdictLabel.UNVERIFIED,
    confidence=20,
    explanation=UNVERIFIABLE_EXPLANATION,
)


def match_rule(claim: str, evidence: List[EvidenceItem]) -> HeuristicRule:
    evidence_text = " ".join(item.snippet for item in evidence).lower()
    claim_text = claim.lower()
    for rule in HEURISTIC_RULES:
        if rule.matches(evidence_text, claim_text):
            return rule
    return DEFAULT_RULE


def cite_evidence(evidence: List[EvidenceItem]) -> List[EvidenceCitation]:
    return [
        EvidenceCitation(
            source_title=item.title,
            source_url=item.url,
            reason=truncate(item.snippet, FACT_CHECK_CONFIG.CITATION_REASON_LENGTH),
        )
        for item in evidence[:FACT_CHECK_CONFIG.MAX_CITATIONS]
    ]


class HeuristicReasoner(ReasoningSource):
    """Keyword decision table used when no LLM is configured."""

    name = "heuristic"
    methods = ("web_search", "heuristic_analysis")

    def __init__(self, delay: float = 0.8):
        self.delay = delay

    def is_configured(self) -> bool:
        return True

    async def judge(self, claim: str, evidence: List[EvidenceItem]) -> Optional[Judgment]:
        if self.delay > 0:
            await asyncio.sleep(self.delay)

        if not evidence:
            return Judgment(
                verdict=VerdictLabel.UNVERIFIED,
                confidence=0,
                summary=NO_SOURCES_SUMMARY,
                explanation=UNVERIFIABLE_EXPLANATION,
                evidence=[],
                methods=["web_search"],
            )

        rule = match_rule(claim, evidence)
        return Judgment(
            verdict=rule.verdict,
            confidence=rule.confidence,
            summary=truncate(rule.explanation, FACT_CHECK_CONFIG.SUMMARY_LENGTH),
            explanation=rule.explanation,
            evidence=cite_evidence(evidence),
            methods=list(self.methods),
        )
