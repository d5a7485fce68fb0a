"""
ROI Projections

Year-by-year forward estimate of an investment's value and return.
Appreciation compounds; yield accumulates as simple (non-compounded)
interest, so total ROI = appreciation % + APR x elapsed years.
"""

from typing import List

from app.calculations.exceptions import InvalidInputError
from app.calculations.numeric import require_count, require_positive, round_financial
from app.calculations.terms import ProjectTerms, ROIProjection


def generate_roi_projections(
    terms: ProjectTerms,
    investment_amount: float,
    years: int = 5,
) -> List[ROIProjection]:
    """
    Generate ROI projections for years 1..years.

    Args:
        terms: Project commercial terms
        investment_amount: Amount invested at year 0
        years: Number of years to project (default 5)

    Returns:
        One ROIProjection per year, in order
    """
    terms.validate()
    require_positive("investment_amount", investment_amount)
    require_count("years", years)
    if years < 1:
        raise InvalidInputError(f"years must be at least 1, got {years}")

    growth_rate = terms.value_growth / 100
    projections = []
    current_value = investment_amount

    for year in range(1, years + 1):
        # Chained, not reset: each year compounds on the previous value
        current_value = current_value * (1 + growth_rate)

        appreciation = (current_value - investment_amount) / investment_amount * 100
        total_roi = appreciation + terms.apr * year

        projections.append(
            ROIProjection(
                year=year,
                projected_value=round_financial(current_value),
                cumulative_return=round_financial(appreciation),
                annual_yield=round_financial(terms.apr),
                total_roi=round_financial(total_roi),
            )
        )

    return projections
