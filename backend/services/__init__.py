from .base import EvidenceSource, ReasoningSource, FailureHook
from .evidence import (
    EvidenceProvider,
    SerpApiSource,
    PerplexitySource,
    GoogleCustomSearchSource,
    OfflineEvidenceSource,
    offline_evidence,
)
from .heuristics import HeuristicReasoner, HEURISTIC_RULES, match_rule
from .reasoning import (
    ReasoningProvider,
    OpenAIReasoningSource,
    AnthropicReasoningSource,
    judgment_from_payload,
    error_judgment,
)
from .orchestration import (
    FactCheckOrchestrator,
    build_orchestrator,
    build_claim,
    apply_override_policy,
    shape_result,
)

__all__ = [
    "EvidenceSource",
    "ReasoningSource",
    "FailureHook",
    "EvidenceProvider",
    "SerpApiSource",
    "PerplexitySource",
    "GoogleCustomSearchSource",
    "OfflineEvidenceSource",
    "offline_evidence",
    "HeuristicReasoner",
    "HEURISTIC_RULES",
    "match_rule",
    "ReasoningProvider",
    "OpenAIReasoningSource",
    "AnthropicReasoningSource",
    "judgment_from_payload",
    "error_judgment",
    "FactCheckOrchestrator",
    "build_orchestrator",
    "build_claim",
    "apply_override_policy",
    "shape_result",
]
