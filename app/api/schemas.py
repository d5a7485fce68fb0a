"""
Shared request/response schemas for the calculation API.

Monetary and percentage figures are serialized as fixed 2-decimal
strings so they survive JSON round-trips without float drift.
"""

import logging
from typing import Annotated

from fastapi import HTTPException
from pydantic import BaseModel, PlainSerializer

from app.calculations import (
    CalculationError,
    ConvergenceError,
    ProjectTerms,
)
from app.calculations.numeric import format_financial_amount, format_percentage

logger = logging.getLogger(__name__)

Money = Annotated[float, PlainSerializer(format_financial_amount, return_type=str)]
Percent = Annotated[float, PlainSerializer(format_percentage, return_type=str)]


class ProjectTermsInput(BaseModel):
    """Commercial terms of a project, all rates in percent."""

    total_price: float
    token_price: float
    tokens_available_percent: float
    min_investment: float
    apr: float
    irr: float
    value_growth: float

    def to_terms(self) -> ProjectTerms:
        return ProjectTerms(**self.model_dump())


def to_http_exception(exc: CalculationError) -> HTTPException:
    """Translate an engine error into the HTTP error returned to clients."""
    status_code = 422 if isinstance(exc, ConvergenceError) else 400
    logger.info(f"Calculation rejected ({type(exc).__name__}): {exc}")
    return HTTPException(status_code=status_code, detail=str(exc))
