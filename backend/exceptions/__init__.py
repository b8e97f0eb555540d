from typing import Optional, Dict, Any

class TruthGuardException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class APIException(TruthGuardException):
    pass

class ValidationException(TruthGuardException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class LLMException(APIException):
    def __init__(self, source: str, reason: str, recoverable: bool = True):
        super().__init__(
            f"LLM service {source} error: {reason}",
            {"source": source, "reason": reason, "recoverable": recoverable}
        )

class EvidenceSourceException(APIException):
    def __init__(self, source: str, reason: str, recoverable: bool = True):
        super().__init__(
            f"Evidence source {source} failed: {reason}",
            {"source": source, "reason": reason, "recoverable": recoverable}
        )

class ResponseParseException(APIException):
    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Could not parse response from {source}: {reason}",
            {"source": source, "reason": reason}
        )
