"""Input guards shared by the calculators"""

import math

from finserv_calculators.domain.exceptions import InvalidInputError


def require_positive(field: str, value: float) -> None:
    """Reject zero, negative and non-finite values"""
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(field, f"must be greater than 0, got {value}")


def require_non_negative(field: str, value: float) -> None:
    """Reject negative and non-finite values"""
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(field, f"must not be negative, got {value}")


def require_whole(field: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, f"must be a whole number, got {value!r}")
