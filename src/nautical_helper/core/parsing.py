"""Text to number conversion for calculator inputs."""
from __future__ import annotations

import math
import re

from nautical_helper.core.results import Invalid, InvalidInputError, calculation

NumberLike = str | int | float

# Plain decimal notation with optional exponent. Rejects "inf", "nan" and
# digit separators that float() would otherwise accept.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def require_number(value: NumberLike | None, name: str = "value") -> float:
    """Parse a required field, raising InvalidInputError when it is unusable."""
    if value is None:
        raise InvalidInputError(f"{name} is required")
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidInputError(f"{name} is empty")
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidInputError(f"{name} is not a number: {value!r}")
        number = float(text)
    else:
        # Decimal, numpy scalars and other number types
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidInputError(f"{name} is not a number: {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInputError(f"{name} is not finite")
    return number


def parse_optional(value: NumberLike | None, default: float | None = None) -> float | None:
    """Parse an optional field; blank or unparseable input falls back to ``default``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        return require_number(value)
    except InvalidInputError:
        return default


@calculation
def parse_number(value: NumberLike | None) -> float | Invalid:
    """Public parser: a finite float, or ``Invalid(INVALID_INPUT)``."""
    return require_number(value)
