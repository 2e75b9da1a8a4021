"""Result values returned across the calculation boundary.

Calculations never raise to their callers. Internally, validation raises one
of the :class:`CalculationError` subclasses below; the :func:`calculation`
decorator converts them into an :class:`Invalid` value.
"""
from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    DOMAIN_ERROR = "domain_error"
    INVALID_INTERVAL = "invalid_interval"
    INVALID_CONFIG = "invalid_config"


@dataclass(frozen=True, slots=True)
class Invalid:
    """Marker for a failed calculation. Carries no partial output."""

    kind: ErrorKind
    message: str = ""

    @property
    def text(self) -> str:
        if self.kind is ErrorKind.INVALID_INPUT:
            return "Invalid input"
        return "Invalid"

    def __bool__(self) -> bool:
        return False


class CalculationError(ValueError):
    kind = ErrorKind.DOMAIN_ERROR

    def to_invalid(self) -> Invalid:
        return Invalid(self.kind, str(self))


class InvalidInputError(CalculationError):
    kind = ErrorKind.INVALID_INPUT


class DomainError(CalculationError):
    kind = ErrorKind.DOMAIN_ERROR


class InvalidIntervalError(CalculationError):
    kind = ErrorKind.INVALID_INTERVAL


class InvalidConfigError(CalculationError):
    kind = ErrorKind.INVALID_CONFIG


def ensure_finite(**values: float) -> None:
    """Raise DomainError if any named value is inf or NaN."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise DomainError(f"{name} is not finite")


def calculation(func: Callable[..., T]) -> Callable[..., T | Invalid]:
    """Wrap a calculator so CalculationError comes back as an Invalid value."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CalculationError as exc:
            logger.debug("%s rejected: %s (%s)", func.__name__, exc, exc.kind.value)
            return exc.to_invalid()
        except ArithmeticError as exc:
            logger.debug("%s overflowed: %s", func.__name__, exc)
            return Invalid(ErrorKind.DOMAIN_ERROR, str(exc))

    return wrapper
