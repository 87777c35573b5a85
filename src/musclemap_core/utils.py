"""Utility functions."""
import math
from typing import Optional


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except Exception:
        return None


def to_float(s: Optional[str]) -> Optional[float]:
    """Convert string to a finite float, accepting a comma as decimal separator."""
    if s is None:
        return None
    try:
        value = float(s.strip().replace(",", "."))
    except ValueError:
        return None
    return value if math.isfinite(value) else None
