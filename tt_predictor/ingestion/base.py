"""
Shared helpers for reading raw JSON values.

Payload producers are not consistent about key spelling, so lookups go
through candidate lists.
"""

from tt_predictor.core.schema import InvalidInputError


def get_value(data: dict, candidates: list[str], default=None):
    """Get value from the first candidate key present and not None."""
    for c in candidates:
        if c in data and data[c] is not None:
            return data[c]
    return default


def safe_str(val, default: str = "") -> str:
    if val is None:
        return default
    return str(val).strip()


def as_points(val) -> int:
    """Convert a JSON number to a point count.

    Integral floats (11.0) are accepted; anything else raises.
    """
    if isinstance(val, bool):
        raise InvalidInputError(f"points must be a number, got {val!r}")
    if isinstance(val, float):
        if not val.is_integer():
            raise InvalidInputError(f"points must be integral, got {val}")
        val = int(val)
    if not isinstance(val, int):
        raise InvalidInputError(f"points must be a number, got {val!r}")
    if val < 0:
        raise InvalidInputError(f"points must be >= 0, got {val}")
    return val
