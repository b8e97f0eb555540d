from typing import Any, List
from config.constants import FACT_CHECK_CONFIG
from models.evidence import EvidenceItem


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def to_evidence_items(
    records: Any,
    title_key: str = "title",
    url_key: str = "link",
    snippet_key: str = "snippet",
    limit: int = FACT_CHECK_CONFIG.MAX_SOURCES,
) -> List[EvidenceItem]:
    """Normalize vendor search records into evidence items, keeping vendor order."""
    if not isinstance(records, list):
        return []

    items = []
    for record in records:
        if not isinstance(record, dict):
            continue
        items.append(EvidenceItem(
            title=_text(record.get(title_key)),
            url=_text(record.get(url_key)),
            snippet=_text(record.get(snippet_key)),
        ))
        if len(items) >= limit:
            break
    return items
