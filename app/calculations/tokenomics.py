"""
Tokenomics and Yield Calculations

Sizes a tokenized offering from its price terms, converts the project
APR into rent and per-token yield, and prices a candidate purchase.
"""

import math

from app.calculations.exceptions import InvalidInputError, RangeViolationError
from app.calculations.numeric import (
    FINANCIAL_CONSTANTS,
    require_count,
    require_finite,
    round_financial,
)
from app.calculations.terms import (
    InvestmentBreakdown,
    ProjectTerms,
    TokenMetrics,
    YieldMetrics,
)

MONTHS_PER_YEAR = FINANCIAL_CONSTANTS["MONTHS_PER_YEAR"]
DAYS_PER_YEAR = FINANCIAL_CONSTANTS["DAYS_PER_YEAR"]


def calculate_tokenomics(
    terms: ProjectTerms,
    sold_tokens: int = 0,
    reserved_tokens: int = 0,
) -> TokenMetrics:
    """
    Calculate total, available and minimum-purchase token counts.

    Args:
        terms: Project commercial terms
        sold_tokens: Tokens already sold
        reserved_tokens: Tokens held in pending reservations

    Returns:
        TokenMetrics for the offering
    """
    terms.validate()
    require_count("sold_tokens", sold_tokens)
    require_count("reserved_tokens", reserved_tokens)

    if terms.token_price <= 0:
        raise InvalidInputError("token_price must be greater than 0")

    token_value = terms.total_price * terms.tokens_available_percent / 100
    total_tokens = math.floor(token_value / terms.token_price)
    minimum_purchase = math.ceil(terms.min_investment / terms.token_price)
    available_tokens = max(0, total_tokens - sold_tokens - reserved_tokens)

    return TokenMetrics(
        total_tokens=total_tokens,
        available_tokens=available_tokens,
        reserved_tokens=reserved_tokens,
        sold_tokens=sold_tokens,
        token_price=terms.token_price,
        minimum_purchase=minimum_purchase,
        maximum_purchase=None,
        total_supply=total_tokens,
        circulating_supply=sold_tokens,
    )


def calculate_yield_metrics(terms: ProjectTerms) -> YieldMetrics:
    """Annual, monthly and daily rent from APR, plus annual yield per token."""
    tokenomics = calculate_tokenomics(terms)
    if tokenomics.total_tokens == 0:
        raise InvalidInputError(
            "Project issues 0 tokens; yield per token is undefined"
        )

    annual_rent = terms.total_price * (terms.apr / 100)

    return YieldMetrics(
        annual_rent=round_financial(annual_rent),
        monthly_rent=round_financial(annual_rent / MONTHS_PER_YEAR),
        daily_yield=round_financial(annual_rent / DAYS_PER_YEAR),
        yield_per_token=round_financial(annual_rent / tokenomics.total_tokens),
    )


def _require_token_amount(token_amount) -> int:
    require_finite("token_amount", token_amount)
    if float(token_amount) != math.floor(token_amount):
        raise InvalidInputError(
            f"token_amount must be a whole number of tokens, got {token_amount}"
        )
    return int(token_amount)


def calculate_investment_breakdown(
    terms: ProjectTerms,
    token_amount: int,
    sold_tokens: int = 0,
    reserved_tokens: int = 0,
) -> InvestmentBreakdown:
    """
    Price a purchase of token_amount tokens.

    Args:
        terms: Project commercial terms
        token_amount: Number of tokens the investor wants to buy
        sold_tokens: Tokens already sold (reduces availability)
        reserved_tokens: Tokens reserved (reduces availability)

    Returns:
        InvestmentBreakdown with cost, yield and projected value

    Raises:
        RangeViolationError: If token_amount is not positive, below the
            minimum purchase, or above the available tokens
    """
    token_amount = _require_token_amount(token_amount)
    if token_amount <= 0:
        raise RangeViolationError(
            f"Token amount must be positive, got {token_amount}",
            bound="positive",
            value=token_amount,
            limit=0,
        )

    tokenomics = calculate_tokenomics(terms, sold_tokens, reserved_tokens)

    if token_amount < tokenomics.minimum_purchase:
        raise RangeViolationError(
            f"Minimum purchase is {tokenomics.minimum_purchase} tokens, "
            f"got {token_amount}",
            bound="minimum_purchase",
            value=token_amount,
            limit=tokenomics.minimum_purchase,
        )

    if token_amount > tokenomics.available_tokens:
        raise RangeViolationError(
            f"Only {tokenomics.available_tokens} tokens available, "
            f"got {token_amount}",
            bound="available_tokens",
            value=token_amount,
            limit=tokenomics.available_tokens,
        )

    # Only reached when available_tokens > 0, so total_tokens > 0
    yield_metrics = calculate_yield_metrics(terms)

    total_investment = token_amount * terms.token_price
    annual_yield = yield_metrics.yield_per_token * token_amount
    monthly_yield = annual_yield / MONTHS_PER_YEAR

    return InvestmentBreakdown(
        token_amount=token_amount,
        total_investment=round_financial(total_investment),
        annual_yield=round_financial(annual_yield),
        monthly_yield=round_financial(monthly_yield),
        yield_percentage=terms.apr,
        projected_value=round_financial(
            total_investment * (1 + terms.value_growth / 100)
        ),
    )
