import re
from typing import Optional
from urllib.parse import urlparse

class ValidationError(ValueError):
    pass

class InputValidator:

    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

    MAX_TEXT_LENGTH = 20000
    MAX_URL_LENGTH = 2048
    ALLOWED_SCHEMES = ("http", "https")

    @staticmethod
    def sanitize_text(text: Optional[str]) -> Optional[str]:
        """Strip control characters; blank input becomes None."""
        if text is None:
            return None

        text = InputValidator.CONTROL_CHARS_PATTERN.sub('', str(text))
        if not text.strip():
            return None
        return text

    @staticmethod
    def sanitize_url(url: Optional[str]) -> Optional[str]:
        if url is None:
            return None

        url = InputValidator.CONTROL_CHARS_PATTERN.sub('', str(url)).strip()
        return url or None

    @staticmethod
    def validate_text_length(text: Optional[str]) -> Optional[str]:
        if text is not None and len(text) > InputValidator.MAX_TEXT_LENGTH:
            raise ValidationError(f"Text cannot exceed {InputValidator.MAX_TEXT_LENGTH} characters")
        return text

    @staticmethod
    def validate_url(url: Optional[str]) -> Optional[str]:
        """Only absolute http(s) URLs are accepted over the API."""
        if url is None:
            return None

        if len(url) > InputValidator.MAX_URL_LENGTH:
            raise ValidationError(f"URL cannot exceed {InputValidator.MAX_URL_LENGTH} characters")

        parsed = urlparse(url)
        if parsed.scheme.lower() not in InputValidator.ALLOWED_SCHEMES or not parsed.netloc:
            raise ValidationError("URL must be an absolute http(s) URL")

        return url
