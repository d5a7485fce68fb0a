"""
Numeric Primitives

Rounding, validation and formatting helpers shared by every calculator.
All outputs of the engine go through round_financial so they share one
rounding policy: round-half-away-from-zero at a fixed number of decimals.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional

from app.calculations.exceptions import InvalidInputError

FINANCIAL_CONSTANTS = {
    "DAYS_PER_YEAR": 365,
    "MONTHS_PER_YEAR": 12,
    "DEFAULT_COMPOUND_FREQUENCY": 12,  # Monthly compounding
    "MAX_IRR_ITERATIONS": 1000,
    "IRR_PRECISION": 0.0001,
    "IRR_RATE_FLOOR": -0.99,
}


def is_finite_number(value) -> bool:
    """True for int/float values that are not NaN or +/-Infinity."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def require_finite(name: str, value: float) -> float:
    """Reject anything that is not a finite real number."""
    if not is_finite_number(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}")
    return value


def require_positive(name: str, value: float) -> float:
    require_finite(name, value)
    if value <= 0:
        raise InvalidInputError(f"{name} must be greater than 0, got {value}")
    return value


def require_non_negative(name: str, value: float) -> float:
    require_finite(name, value)
    if value < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value}")
    return value


def require_percent(name: str, value: float) -> float:
    """Percentage in the half-open interval (0, 100]."""
    require_finite(name, value)
    if value <= 0 or value > 100:
        raise InvalidInputError(f"{name} must be within (0, 100], got {value}")
    return value


def require_count(name: str, value: int) -> int:
    """Non-negative whole number (token counts, years)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value}")
    return value


def round_financial(value: float, decimals: int = 2) -> float:
    """
    Round half away from zero at a fixed number of decimal places.

    The value is converted through its shortest string representation so
    that 2.675 rounds to 2.68 the way a person reading the number expects,
    not to 2.67 as binary floating point would.

    Args:
        value: Number to round
        decimals: Decimal places to keep (default 2)

    Returns:
        Rounded value as float
    """
    value = float(value)
    require_finite("value", value)
    if abs(value) >= 1e15:
        # No fractional precision left at this magnitude
        return value
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    result = float(rounded)
    # Avoid emitting -0.0 for values that round to zero
    return result + 0.0


def validate_financial_inputs(
    amount: float,
    rate: Optional[float] = None,
    periods: Optional[float] = None,
) -> bool:
    """Non-raising check: amount > 0, rate >= 0 and periods > 0, all finite."""
    if not is_finite_number(amount) or amount <= 0:
        return False

    if rate is not None and (not is_finite_number(rate) or rate < 0):
        return False

    if periods is not None and (not is_finite_number(periods) or periods <= 0):
        return False

    return True


def format_financial_amount(amount: float) -> str:
    """Fixed 2-decimal string for monetary values."""
    return f"{round_financial(amount):.2f}"


def format_percentage(percentage: float) -> str:
    """Fixed 2-decimal string for percentage values."""
    return f"{round_financial(percentage):.2f}"


def _parse_decimal_string(raw: str, label: str) -> float:
    try:
        parsed = Decimal(str(raw).strip())
    except InvalidOperation:
        raise InvalidInputError(f"Invalid {label}: {raw}")
    if not parsed.is_finite():
        raise InvalidInputError(f"Invalid {label}: {raw}")
    return round_financial(float(parsed))


def parse_financial_amount(amount_str: str) -> float:
    """Parse a monetary string back to a 2-decimal float."""
    return _parse_decimal_string(amount_str, "financial amount")


def parse_percentage(percentage_str: str) -> float:
    """Parse a percentage string back to a 2-decimal float."""
    return _parse_decimal_string(percentage_str, "percentage")
