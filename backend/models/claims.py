from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.validation import InputValidator

class FactCheckRequest(BaseModel):
    """Claim input for the pipeline. Any non-blank field is usable; text wins over URL, URL over image URL."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "inputText": "Scientists published a new study on vaccines"
            }
        },
    )

    input_text: Optional[str] = Field(None, alias="inputText")
    input_url: Optional[str] = Field(None, alias="inputUrl")
    input_image_url: Optional[str] = Field(None, alias="inputImageUrl")

    @field_validator("input_text")
    @classmethod
    def sanitize_text(cls, v):
        return InputValidator.sanitize_text(v)

    @field_validator("input_url", "input_image_url")
    @classmethod
    def sanitize_url(cls, v):
        return InputValidator.sanitize_url(v)

    def has_input(self) -> bool:
        return bool(self.input_text or self.input_url or self.input_image_url)


class FactCheckPayload(FactCheckRequest):
    """Request body of the fact-check endpoint: bounded text and absolute http(s) URLs only."""

    @field_validator("input_text")
    @classmethod
    def check_text_length(cls, v):
        return InputValidator.validate_text_length(v)

    @field_validator("input_url", "input_image_url")
    @classmethod
    def check_url(cls, v):
        return InputValidator.validate_url(v)
