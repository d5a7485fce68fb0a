"""
Portfolio Calculations

Combines several simultaneous holdings into investment-weighted
portfolio figures.
"""

from typing import Iterable, List, Tuple

import numpy as np

from app.calculations.exceptions import InvalidInputError
from app.calculations.numeric import require_positive, round_financial
from app.calculations.terms import PortfolioMetrics, ProjectTerms

Holding = Tuple[ProjectTerms, float]


def calculate_portfolio_metrics(investments: Iterable[Holding]) -> PortfolioMetrics:
    """
    Calculate weighted portfolio metrics.

    Each holding is weighted by its share of total capital:
    weight = amount / total_investment.

    Args:
        investments: (terms, investment_amount) pairs

    Returns:
        PortfolioMetrics with weighted APR, target IRR and value growth

    Raises:
        InvalidInputError: If no investments are given or any is invalid
    """
    holdings: List[Holding] = list(investments)
    if not holdings:
        raise InvalidInputError("No investments provided")

    for index, (terms, amount) in enumerate(holdings):
        terms.validate()
        require_positive(f"investments[{index}].amount", amount)

    amounts = np.array([amount for _, amount in holdings], dtype=float)
    total_investment = float(amounts.sum())
    weights = amounts / total_investment

    weighted_apr = float(np.dot([t.apr for t, _ in holdings], weights))
    weighted_irr = float(np.dot([t.irr for t, _ in holdings], weights))
    weighted_growth = float(np.dot([t.value_growth for t, _ in holdings], weights))

    return PortfolioMetrics(
        total_investment=round_financial(total_investment),
        number_of_projects=len(holdings),
        average_apr=round_financial(weighted_apr),
        average_irr=round_financial(weighted_irr),
        average_value_growth=round_financial(weighted_growth),
        projected_annual_yield=round_financial(total_investment * weighted_apr / 100),
    )
