"""English ordinal formatting ("119" -> "119th")."""
from typing import Any


def _coerce_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        pass
    try:
        return int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return 0


def ordinal(value: Any) -> str:
    """
    Format a number as an English ordinal.

    Non-numeric input is treated as 0, so this never raises.

    Args:
        value: An int or numeric string (e.g. 119 or "119")

    Returns:
        Ordinal string, e.g. "119th", "101st", "112th"
    """
    num = _coerce_int(value)
    mod100 = num % 100
    if 11 <= mod100 <= 13:
        return f"{num}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(num % 10, "th")
    return f"{num}{suffix}"
