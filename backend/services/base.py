from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from config import logger
from models.evidence import EvidenceItem
from models.verdicts import Judgment

# on_failure(stage, source_name, exc)
FailureHook = Callable[[str, str, BaseException], None]


def report_failure(hook: Optional[FailureHook], stage: str, source_name: str, exc: BaseException) -> None:
    if hook is None:
        return
    try:
        hook(stage, source_name, exc)
    except Exception:
        logger.exception("Failure hook raised while reporting %s/%s", stage, source_name)


class EvidenceSource(ABC):
    """A search capability that turns a claim into evidence items."""

    name: str = "evidence"

    @abstractmethod
    def is_configured(self) -> bool:
        ...

    @abstractmethod
    async def search(self, claim: str) -> List[EvidenceItem]:
        ...


class ReasoningSource(ABC):
    """A reasoning capability that judges a claim against evidence.

    `judge` returns None to decline, which lets the provider try the next
    configured source. Raising is a failure.
    """

    name: str = "reasoning"
    methods: Tuple[str, ...] = ()

    @abstractmethod
    def is_configured(self) -> bool:
        ...

    @abstractmethod
    async def judge(self, claim: str, evidence: List[EvidenceItem]) -> Optional[Judgment]:
        ...
