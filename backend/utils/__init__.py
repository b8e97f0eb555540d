from .parsing import extract_json_block, parse_numeric_value, clamp, round_half_up, truncate
from .validation import InputValidator, ValidationError

__all__ = [
    "extract_json_block",
    "parse_numeric_value",
    "clamp",
    "round_half_up",
    "truncate",
    "InputValidator",
    "ValidationError",
]
