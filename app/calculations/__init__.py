"""
Financial Calculation Engine

Pure calculation modules for real estate tokenization projects:
time-value functions, tokenomics, yield, ROI projections, risk scoring
and portfolio aggregation. No module performs I/O or keeps state.
"""

from app.calculations import irr, numeric, portfolio, projections, risk, tokenomics
from app.calculations.exceptions import (
    CalculationError,
    ConvergenceError,
    InvalidInputError,
    RangeViolationError,
)
from app.calculations.terms import ProjectTerms

__all__ = [
    "irr",
    "numeric",
    "portfolio",
    "projections",
    "risk",
    "tokenomics",
    "CalculationError",
    "ConvergenceError",
    "InvalidInputError",
    "RangeViolationError",
    "ProjectTerms",
]
