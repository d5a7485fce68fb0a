"""
IRR, NPV and Time-Value Calculations

Implements IRR using the Newton-Raphson method plus the NPV, CAGR,
present value and future value helpers used for project analysis.
Rates are taken and returned in percent (8.5 means 8.5%) except for the
IRR initial guess, which is a decimal rate like Excel's IRR() guess.
"""

import logging
import math
from typing import List, Sequence

from app.calculations.exceptions import ConvergenceError, InvalidInputError
from app.calculations.numeric import (
    FINANCIAL_CONSTANTS,
    require_finite,
    require_non_negative,
    require_positive,
    round_financial,
)

logger = logging.getLogger(__name__)

MAX_ITERATIONS = FINANCIAL_CONSTANTS["MAX_IRR_ITERATIONS"]
TOLERANCE = FINANCIAL_CONSTANTS["IRR_PRECISION"]
RATE_FLOOR = FINANCIAL_CONSTANTS["IRR_RATE_FLOOR"]
DEFAULT_GUESS = 0.1


def _validate_cash_flows(cash_flows: Sequence[float]) -> List[float]:
    flows = list(cash_flows)
    for period, cf in enumerate(flows, start=1):
        require_finite(f"cash_flows[{period}]", cf)
    return flows


def _power(base: float, exponent: float, label: str) -> float:
    """Float power that reports overflow as invalid input."""
    try:
        return base ** exponent
    except OverflowError:
        raise InvalidInputError(f"{label} is out of the representable range")


def _discounted_sum(cash_flows: List[float], rate: float) -> float:
    """NPV of a series whose first element sits at period 0."""
    npv = 0.0
    for period, cf in enumerate(cash_flows):
        npv += cf / ((1 + rate) ** period)
    return npv


def _npv_derivative(cash_flows: List[float], rate: float) -> float:
    """Derivative of NPV with respect to rate (for Newton-Raphson)."""
    dnpv = 0.0
    for period, cf in enumerate(cash_flows):
        if period == 0:
            continue
        dnpv -= (period * cf) / ((1 + rate) ** (period + 1))
    return dnpv


def calculate_npv(
    initial_investment: float,
    cash_flows: Sequence[float],
    discount_rate: float,
) -> float:
    """
    Calculate NPV (Net Present Value) of an investment.

    The initial investment is an outflow at period 0; cash_flows[0] is
    received at the end of period 1.

    Args:
        initial_investment: Amount invested up front (positive)
        cash_flows: Cash flows for periods 1..n
        discount_rate: Discount rate per period in percent (e.g., 10 for 10%)

    Returns:
        NPV rounded to 2 decimals

    Raises:
        InvalidInputError: If any input violates its precondition
    """
    require_positive("initial_investment", initial_investment)
    require_non_negative("discount_rate", discount_rate)
    flows = _validate_cash_flows(cash_flows)

    rate = discount_rate / 100
    npv = -initial_investment
    discount_factor = 1.0
    for cf in flows:
        # Grows to inf on long series; cf / inf == 0.0
        discount_factor *= 1 + rate
        npv += cf / discount_factor
    return round_financial(npv)


def calculate_irr(
    initial_investment: float,
    cash_flows: Sequence[float],
    guess: float = DEFAULT_GUESS,
) -> float:
    """
    Calculate IRR (Internal Rate of Return) using Newton-Raphson method.

    Only one root is searched for, starting from guess. For cash flows
    with several sign changes the result is whichever root the iteration
    reaches first.

    Args:
        initial_investment: Amount invested up front (positive)
        cash_flows: Cash flows for periods 1..n (non-empty)
        guess: Initial guess for rate as decimal (default 0.1 = 10%)

    Returns:
        IRR in percent, rounded to 2 decimals (e.g., 12.5 for 12.5%)

    Raises:
        InvalidInputError: If inputs violate preconditions
        ConvergenceError: If the iteration cannot converge
    """
    require_positive("initial_investment", initial_investment)
    flows = _validate_cash_flows(cash_flows)
    if not flows:
        raise InvalidInputError("At least 1 cash flow after the initial investment required")
    require_finite("guess", guess)
    if guess <= -1:
        raise InvalidInputError(f"guess must be greater than -1, got {guess}")

    all_flows = [-initial_investment] + flows
    rate = guess

    for iteration in range(MAX_ITERATIONS):
        try:
            npv = _discounted_sum(all_flows, rate)
            dnpv = _npv_derivative(all_flows, rate)
        except (OverflowError, ZeroDivisionError) as exc:
            logger.warning(f"IRR overflow at iteration {iteration} (rate={rate})")
            raise ConvergenceError(
                "IRR calculation failed: numeric overflow",
                iterations=iteration,
                rate=rate,
            ) from exc

        if not (math.isfinite(npv) and math.isfinite(dnpv)):
            logger.warning(f"IRR produced a non-finite NPV at iteration {iteration}")
            raise ConvergenceError(
                "IRR calculation failed: NPV is not finite",
                iterations=iteration,
                rate=rate,
            )

        if abs(npv) < TOLERANCE:
            logger.debug(f"IRR converged after {iteration} iterations: rate={rate}")
            return round_financial(rate * 100)

        if abs(dnpv) < TOLERANCE:
            logger.warning(f"IRR derivative too small at iteration {iteration} (rate={rate})")
            raise ConvergenceError(
                "IRR calculation failed: derivative too small",
                iterations=iteration,
                rate=rate,
            )

        rate = rate - npv / dnpv

        # Keep (1 + rate) away from zero
        if rate < RATE_FLOOR:
            rate = RATE_FLOOR

    logger.warning(f"IRR did not converge within {MAX_ITERATIONS} iterations")
    raise ConvergenceError(
        "IRR calculation exceeded maximum iterations",
        iterations=MAX_ITERATIONS,
        rate=rate,
    )


def calculate_cagr(initial_value: float, final_value: float, years: float) -> float:
    """
    Calculate CAGR (Compound Annual Growth Rate).

    Returns:
        CAGR in percent, rounded to 2 decimals
    """
    require_positive("initial_value", initial_value)
    require_positive("final_value", final_value)
    require_positive("years", years)

    growth = _power(final_value / initial_value, 1 / years, "growth factor")
    return round_financial((growth - 1) * 100)


def calculate_present_value(
    future_value: float, discount_rate: float, periods: float
) -> float:
    """Discount a single future amount back to today (rate in percent)."""
    require_positive("future_value", future_value)
    require_non_negative("discount_rate", discount_rate)
    require_positive("periods", periods)

    try:
        present_value = future_value / (1 + discount_rate / 100) ** periods
    except OverflowError:
        # Factor too large to represent; discount in log space instead
        present_value = future_value * math.exp(-periods * math.log1p(discount_rate / 100))
    return round_financial(present_value)


def calculate_future_value(
    present_value: float,
    interest_rate: float,
    periods: float,
    compounding_frequency: int = FINANCIAL_CONSTANTS["DEFAULT_COMPOUND_FREQUENCY"],
) -> float:
    """
    Calculate future value with compound interest.

    Args:
        present_value: Amount today
        interest_rate: Annual interest rate in percent
        periods: Number of years
        compounding_frequency: Compounding periods per year (default 12)

    Returns:
        Future value rounded to 2 decimals
    """
    require_positive("present_value", present_value)
    require_non_negative("interest_rate", interest_rate)
    require_positive("periods", periods)
    require_positive("compounding_frequency", compounding_frequency)

    rate = interest_rate / 100 / compounding_frequency
    total_periods = periods * compounding_frequency
    return round_financial(
        present_value * _power(1 + rate, total_periods, "compounding factor")
    )
