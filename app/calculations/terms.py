"""
Project Terms and Derived Value Objects

ProjectTerms is the immutable snapshot of a project's commercial terms
handed to every project-level calculator. Everything else in this module
is a derived record, recomputed on each call and never persisted here.
"""

import enum
from dataclasses import dataclass, field
from typing import Dict, Optional

from app.calculations.exceptions import InvalidInputError
from app.calculations.numeric import (
    require_non_negative,
    require_percent,
    require_positive,
)


@dataclass(frozen=True)
class ProjectTerms:
    """Commercial terms of a tokenized real estate project."""

    total_price: float  # Full asset valuation
    token_price: float
    tokens_available_percent: float  # Share of asset value tokenized, (0, 100]
    min_investment: float
    apr: float  # Contractual annual yield rate, percent
    irr: float  # Target IRR, percent (a project attribute, not computed)
    value_growth: float  # Expected annual appreciation, percent

    def validate(self) -> "ProjectTerms":
        """
        Enforce the business constraints on the terms.

        Raises:
            InvalidInputError: On the first violated constraint
        """
        require_positive("total_price", self.total_price)
        require_positive("token_price", self.token_price)
        require_percent("tokens_available_percent", self.tokens_available_percent)
        require_positive("min_investment", self.min_investment)
        require_non_negative("apr", self.apr)
        require_non_negative("irr", self.irr)
        require_non_negative("value_growth", self.value_growth)

        if self.token_price > self.total_price:
            raise InvalidInputError(
                f"token_price ({self.token_price}) cannot exceed "
                f"total_price ({self.total_price})"
            )
        if self.min_investment > self.total_price:
            raise InvalidInputError(
                f"min_investment ({self.min_investment}) cannot exceed "
                f"total_price ({self.total_price})"
            )
        return self


@dataclass(frozen=True)
class TokenMetrics:
    """Sizing of a tokenized offering."""

    total_tokens: int
    available_tokens: int
    reserved_tokens: int
    sold_tokens: int
    token_price: float
    minimum_purchase: int
    maximum_purchase: Optional[int]
    total_supply: int
    circulating_supply: int


@dataclass(frozen=True)
class YieldMetrics:
    annual_rent: float
    monthly_rent: float
    daily_yield: float
    yield_per_token: float


@dataclass(frozen=True)
class InvestmentBreakdown:
    """Investor-facing cost and yield figures for one token purchase."""

    token_amount: int
    total_investment: float
    annual_yield: float
    monthly_yield: float
    yield_percentage: float
    projected_value: float


@dataclass(frozen=True)
class ROIProjection:
    year: int
    projected_value: float
    cumulative_return: float  # Appreciation only, percent
    annual_yield: float  # Percent
    total_roi: float  # Appreciation plus simple accumulated yield, percent


class RiskLevel(str, enum.Enum):
    """Overall risk bucket."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"


@dataclass(frozen=True)
class RiskAssessment:
    risk_score: int
    risk_level: RiskLevel
    factors: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PortfolioMetrics:
    """Investment-weighted figures across several holdings."""

    total_investment: float
    number_of_projects: int
    average_apr: float
    average_irr: float
    average_value_growth: float
    projected_annual_yield: float
