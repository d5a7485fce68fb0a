"""
Financial calculation API endpoints.

These endpoints accept plain numeric inputs and return the results of
the core time-value functions.
"""

from fastapi import APIRouter
from pydantic import BaseModel
from typing import List, Optional

from app.api.schemas import Money, Percent, to_http_exception
from app.calculations import CalculationError, irr
from app.config import get_settings

settings = get_settings()

router = APIRouter()


class NPVInput(BaseModel):
    """Input for NPV calculation."""

    initial_investment: float
    cash_flows: List[float]
    discount_rate: float  # Percent


class NPVResponse(BaseModel):
    npv: Money


@router.post("/npv", response_model=NPVResponse)
async def calculate_npv_endpoint(inputs: NPVInput):
    """Calculate NPV of an investment at a given discount rate."""
    try:
        npv = irr.calculate_npv(
            inputs.initial_investment, inputs.cash_flows, inputs.discount_rate
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return NPVResponse(npv=npv)


class IRRInput(BaseModel):
    """Input for IRR calculation."""

    initial_investment: float
    cash_flows: List[float]
    guess: Optional[float] = None  # Decimal, e.g. 0.1


class IRRResponse(BaseModel):
    """Response with IRR calculation."""

    irr: Percent
    npv_at_10_percent: Money


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr_endpoint(inputs: IRRInput):
    """Calculate IRR for given cash flows."""
    guess = inputs.guess if inputs.guess is not None else settings.default_irr_guess

    try:
        irr_val = irr.calculate_irr(inputs.initial_investment, inputs.cash_flows, guess)
        npv = irr.calculate_npv(inputs.initial_investment, inputs.cash_flows, 10)
    except CalculationError as e:
        raise to_http_exception(e)

    return IRRResponse(irr=irr_val, npv_at_10_percent=npv)


class CAGRInput(BaseModel):
    initial_value: float
    final_value: float
    years: float


class CAGRResponse(BaseModel):
    cagr: Percent


@router.post("/cagr", response_model=CAGRResponse)
async def calculate_cagr_endpoint(inputs: CAGRInput):
    """Calculate compound annual growth rate."""
    try:
        cagr = irr.calculate_cagr(inputs.initial_value, inputs.final_value, inputs.years)
    except CalculationError as e:
        raise to_http_exception(e)

    return CAGRResponse(cagr=cagr)


class PresentValueInput(BaseModel):
    future_value: float
    discount_rate: float
    periods: float


class PresentValueResponse(BaseModel):
    present_value: Money


@router.post("/present-value", response_model=PresentValueResponse)
async def calculate_present_value_endpoint(inputs: PresentValueInput):
    """Discount a future amount to today."""
    try:
        pv = irr.calculate_present_value(
            inputs.future_value, inputs.discount_rate, inputs.periods
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return PresentValueResponse(present_value=pv)


class FutureValueInput(BaseModel):
    present_value: float
    interest_rate: float
    periods: float
    compounding_frequency: int = 12


class FutureValueResponse(BaseModel):
    future_value: Money


@router.post("/future-value", response_model=FutureValueResponse)
async def calculate_future_value_endpoint(inputs: FutureValueInput):
    """Compound a present amount forward."""
    try:
        fv = irr.calculate_future_value(
            inputs.present_value,
            inputs.interest_rate,
            inputs.periods,
            inputs.compounding_frequency,
        )
    except CalculationError as e:
        raise to_http_exception(e)

    return FutureValueResponse(future_value=fv)
