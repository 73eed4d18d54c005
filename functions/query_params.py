import math
from typing import List, Optional

# Bounds of a signed 64-bit database integer
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# Custom parsers for optional query string values
def parse_optional_int(value: Optional[str]) -> Optional[int]:
    """Parse optional integer from a query value, handling empty strings.

    A finite decimal like "5.0" keeps its integer part.
    """
    if value is None or value.strip() == "":
        return None
    value = value.strip()
    try:
        return int(value)
    except (ValueError, TypeError):
        pass
    parsed = parse_optional_float(value)
    if parsed is None:
        return None
    return math.trunc(parsed)

def parse_optional_id(value: Optional[str]) -> Optional[int]:
    """Parse an optional row id; values a database integer cannot hold count as missing"""
    parsed = parse_optional_int(value)
    if parsed is None or not INT64_MIN <= parsed <= INT64_MAX:
        return None
    return parsed

def parse_optional_float(value: Optional[str]) -> Optional[float]:
    """Parse optional float from a query value; NaN and infinity count as missing"""
    if value is None or value.strip() == "":
        return None
    try:
        parsed = float(value.strip())
    except (ValueError, TypeError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed

def parse_optional_bool(value: Optional[str]) -> Optional[bool]:
    """Parse optional boolean from a query value"""
    if value is None or value == "":
        return None
    return value.strip().lower() in ['true', '1', 'yes', 'on']

def parse_csv_list(value: Optional[str]) -> List[str]:
    """Split a comma separated value, dropping empty tokens"""
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]

def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))
