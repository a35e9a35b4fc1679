from typing import Optional

from ..errors import BadRequestError


def parse_int_param(
    value: Optional[str],
    name: str,
    default: int,
    minimum: int = 0,
    maximum: Optional[int] = None,
    usage: Optional[str] = None,
) -> int:
    """
    Integer query parameter with a default for missing/blank values.

    Raises:
        BadRequestError: not an integer, or outside [minimum, maximum]
    """
    if value is None or not str(value).strip():
        return default

    details = {"usage": usage} if usage else {}
    try:
        number = int(str(value).strip())
    except ValueError:
        raise BadRequestError(f"{name} must be an integer, got {value!r}", **details)

    if number < minimum or (maximum is not None and number > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise BadRequestError(f"{name} must be {bounds}, got {number}", **details)
    return number
