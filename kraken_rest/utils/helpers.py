"""
Utility functions
"""
import json
from enum import Enum
from typing import Any, Optional


def header_value_error(value: str) -> Optional[str]:
    """
    Check that a string can be sent as an HTTP header value.

    Args:
        value: candidate header value

    Returns:
        None if the value is valid, otherwise the reason it is not
    """
    for position, char in enumerate(value):
        if char == "\t":
            continue
        if not 32 <= ord(char) < 127:
            return f"invalid character {char!r} at position {position}"
    return None


def to_param(value: Any) -> str:
    """Render a parameter value the way the API expects it"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def safe_json_dumps(data: Any, **kwargs) -> str:
    """JSON serialization that never fails on unknown types"""
    return json.dumps(data, indent=2, default=str, **kwargs)
