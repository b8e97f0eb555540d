from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .evidence import EvidenceCitation, EvidenceItem


class VerdictLabel(str, Enum):
    """Closed set of truthfulness labels."""

    TRUE = "true"
    FALSE = "false"
    MOSTLY_TRUE = "mostly_true"
    MOSTLY_FALSE = "mostly_false"
    MIXED = "mixed"
    UNVERIFIED = "unverified"


def coerce_verdict(value: Any) -> VerdictLabel:
    """Map a provider's verdict onto the closed set; anything unrecognized is unverified."""
    if isinstance(value, VerdictLabel):
        return value
    if isinstance(value, bool):
        return VerdictLabel.TRUE if value else VerdictLabel.FALSE
    if not isinstance(value, str):
        return VerdictLabel.UNVERIFIED

    normalized = "_".join(value.strip().lower().replace("-", " ").split())
    try:
        return VerdictLabel(normalized)
    except ValueError:
        return VerdictLabel.UNVERIFIED


class Judgment(BaseModel):
    """Raw reasoning output, before the override policy."""
    model_config = ConfigDict(frozen=True)

    verdict: VerdictLabel = VerdictLabel.UNVERIFIED
    confidence: float = Field(0.0, allow_inf_nan=False)
    summary: str = ""
    explanation: str = ""
    evidence: List[EvidenceCitation] = Field(default_factory=list)
    methods: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class FactCheckResult(BaseModel):
    """Final, post-policy result handed to the request handler."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verdict: VerdictLabel
    credibility: int = Field(..., ge=0, le=100)
    summary: str
    explanation: str
    sources: List[EvidenceItem] = Field(default_factory=list, max_length=8)
    methods: List[str] = Field(default_factory=list, alias="detectionMethods")
