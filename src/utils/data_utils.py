"""Data parsing and conversion utilities."""

import math
from typing import Optional


def parse_numeric_optional(val) -> Optional[float]:
    """
    Parse a result value to float, returning None when it carries no number.

    Args:
        val: Value to parse (number, numeric string, or anything else)

    Returns:
        Float value, or None for missing, boolean, non-numeric, NaN or
        infinite input
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
    try:
        number = float(val)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_text_optional(val) -> Optional[str]:
    """Return ``val`` when it is a non-empty string, otherwise None."""
    if isinstance(val, str) and val:
        return val
    return None


def format_value(value: Optional[float], decimal_places: int, unit: str = '', missing: str = '-') -> str:
    """
    Format a numeric value with specified precision and unit.

    Args:
        value: Numeric value to format (None renders as ``missing``)
        decimal_places: Number of decimal places
        unit: Optional unit suffix (e.g., '%')
        missing: Placeholder for absent values

    Returns:
        Formatted string
    """
    if value is None:
        return missing
    return f"{value:.{decimal_places}f}{unit}"
