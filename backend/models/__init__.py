from .claims import FactCheckRequest, FactCheckPayload
from .evidence import EvidenceItem, EvidenceCitation
from .verdicts import (
    VerdictLabel,
    coerce_verdict,
    Judgment,
    FactCheckResult,
)

__all__ = [
    "FactCheckRequest",
    "FactCheckPayload",

    "EvidenceItem",
    "EvidenceCitation",

    "VerdictLabel",
    "coerce_verdict",
    "Judgment",
    "FactCheckResult",
]
