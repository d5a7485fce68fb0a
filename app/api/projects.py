"""
Project analysis API endpoints.

Tokenomics, yield, purchase breakdown, ROI projections, risk and
portfolio figures for tokenized real estate projects.
"""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Dict, List, Optional

from app.api.schemas import Money, Percent, ProjectTermsInput, to_http_exception
from app.calculations import CalculationError
from app.calculations.portfolio import calculate_portfolio_metrics
from app.calculations.projections import generate_roi_projections
from app.calculations.risk import calculate_risk_metrics
from app.calculations.terms import RiskLevel
from app.calculations.tokenomics import (
    calculate_investment_breakdown,
    calculate_tokenomics,
    calculate_yield_metrics,
)
from app.config import get_settings

settings = get_settings()

router = APIRouter()


class TokenomicsInput(BaseModel):
    """Input for tokenomics calculation."""

    terms: ProjectTermsInput
    sold_tokens: int = 0
    reserved_tokens: int = 0


class TokenomicsResponse(BaseModel):
    total_tokens: int
    available_tokens: int
    reserved_tokens: int
    sold_tokens: int
    token_price: Money
    minimum_purchase: int
    maximum_purchase: Optional[int] = None
    total_supply: int
    circulating_supply: int


@router.post("/tokenomics", response_model=TokenomicsResponse)
async def tokenomics_endpoint(inputs: TokenomicsInput):
    """Size a tokenized offering."""
    try:
        metrics = calculate_tokenomics(
            inputs.terms.to_terms(), inputs.sold_tokens, inputs.reserved_tokens
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return TokenomicsResponse(**asdict(metrics))


class YieldResponse(BaseModel):
    annual_rent: Money
    monthly_rent: Money
    daily_yield: Money
    yield_per_token: Money


@router.post("/yield", response_model=YieldResponse)
async def yield_endpoint(terms: ProjectTermsInput):
    """Convert project APR into rent and per-token yield."""
    try:
        metrics = calculate_yield_metrics(terms.to_terms())
    except CalculationError as e:
        raise to_http_exception(e)

    return YieldResponse(**asdict(metrics))


class BreakdownInput(BaseModel):
    """Input for a token purchase breakdown."""

    terms: ProjectTermsInput
    token_amount: int
    sold_tokens: int = 0
    reserved_tokens: int = 0


class BreakdownResponse(BaseModel):
    token_amount: int
    total_investment: Money
    annual_yield: Money
    monthly_yield: Money
    yield_percentage: Percent
    projected_value: Money


@router.post("/breakdown", response_model=BreakdownResponse)
async def breakdown_endpoint(inputs: BreakdownInput):
    """Price a purchase of a given number of tokens."""
    try:
        breakdown = calculate_investment_breakdown(
            inputs.terms.to_terms(),
            inputs.token_amount,
            inputs.sold_tokens,
            inputs.reserved_tokens,
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return BreakdownResponse(**asdict(breakdown))


class ProjectionInput(BaseModel):
    """Input for ROI projections."""

    terms: ProjectTermsInput
    investment_amount: float
    years: Optional[int] = None


class ProjectionRow(BaseModel):
    year: int
    projected_value: Money
    cumulative_return: Percent
    annual_yield: Percent
    total_roi: Percent


class ProjectionResponse(BaseModel):
    projections: List[ProjectionRow]


@router.post("/projections", response_model=ProjectionResponse)
async def projections_endpoint(inputs: ProjectionInput):
    """Generate year-by-year ROI projections."""
    years = inputs.years if inputs.years is not None else settings.default_projection_years

    if years > settings.max_projection_years:
        raise HTTPException(
            status_code=400,
            detail=f"years cannot exceed {settings.max_projection_years}",
        )

    try:
        rows = generate_roi_projections(
            inputs.terms.to_terms(), inputs.investment_amount, years
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return ProjectionResponse(projections=[ProjectionRow(**asdict(r)) for r in rows])


class RiskResponse(BaseModel):
    risk_score: int
    risk_level: RiskLevel
    factors: Dict[str, str]


@router.post("/risk", response_model=RiskResponse)
async def risk_endpoint(terms: ProjectTermsInput):
    """Score the investment risk of a project."""
    try:
        assessment = calculate_risk_metrics(terms.to_terms())
    except CalculationError as e:
        raise to_http_exception(e)

    return RiskResponse(**asdict(assessment))


class HoldingInput(BaseModel):
    terms: ProjectTermsInput
    investment: float


class PortfolioInput(BaseModel):
    investments: List[HoldingInput]


class PortfolioResponse(BaseModel):
    total_investment: Money
    number_of_projects: int
    average_apr: Percent
    average_irr: Percent
    average_value_growth: Percent
    projected_annual_yield: Money


@router.post("/portfolio", response_model=PortfolioResponse)
async def portfolio_endpoint(inputs: PortfolioInput):
    """Aggregate several holdings into weighted portfolio metrics."""
    try:
        metrics = calculate_portfolio_metrics(
            (h.terms.to_terms(), h.investment) for h in inputs.investments
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return PortfolioResponse(**asdict(metrics))
