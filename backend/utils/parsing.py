import json
import math
import re
from typing import Any, Optional, Dict


def extract_json_block(text: str) -> Optional[Dict[str, Any]]:
    """Extract the first balanced JSON object from free text.

    Returns None when the text holds no balanced `{...}` candidate.
    Raises ValueError when a candidate is found but does not decode to a dict.
    """
    if not text:
        return None

    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                candidate = text[start : i + 1]
                try:
                    parsed = json.loads(candidate)
                except json.JSONDecodeError:
                    cleaned = re.sub(r"[\x00-\x1f]", "", candidate)
                    parsed = json.loads(cleaned)
                if not isinstance(parsed, dict):
                    raise ValueError("JSON candidate is not an object")
                return parsed
    return None

def parse_numeric_value(val: Any) -> Optional[float]:
    """Parse a numeric value from various string formats ("85", "85%", "1,000")."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        return float(val) if math.isfinite(val) else None
    try:
        s = str(val).strip().replace(",", "").replace("%", "")
        m = re.match(r"^(-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)", s)
        result = float(m.group(1)) if m else float(s)
        return result if math.isfinite(result) else None
    except (ValueError, TypeError):
        return None


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def truncate(text: Optional[str], length: int) -> str:
    return (text or "")[:length]
