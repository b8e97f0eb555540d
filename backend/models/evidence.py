from pydantic import BaseModel, ConfigDict, Field


class EvidenceItem(BaseModel):
    """One retrieved source."""
    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str = ""
    snippet: str = ""


class EvidenceCitation(BaseModel):
    """Reference from a judgment back to an evidence item."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source_title: str = Field("", alias="sourceTitle")
    source_url: str = Field("", alias="sourceUrl")
    reason: str = ""
