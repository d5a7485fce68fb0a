"""
Risk Assessment

Additive point system over a project's rate parameters. Each rule scores
independently; the sum maps to an overall risk level.
"""

from typing import List, Tuple

from app.calculations.terms import ProjectTerms, RiskAssessment, RiskLevel

# (threshold, points) pairs, highest first; first strict ">" match wins
APR_POINTS: List[Tuple[float, int]] = [(15, 3), (10, 2), (5, 1)]
SPREAD_POINTS: List[Tuple[float, int]] = [(10, 2), (5, 1)]
GROWTH_POINTS: List[Tuple[float, int]] = [(10, 2), (5, 1)]

LARGE_PROJECT_PRICE = 10_000_000
SMALL_PROJECT_PRICE = 100_000

# Upper score bound for each level
RISK_LEVELS: List[Tuple[int, RiskLevel]] = [
    (2, RiskLevel.LOW),
    (4, RiskLevel.MEDIUM),
    (6, RiskLevel.HIGH),
]


def _points(value: float, table: List[Tuple[float, int]]) -> int:
    for threshold, points in table:
        if value > threshold:
            return points
    return 0


def _label(value: float, high: float = 10, medium: float = 5) -> str:
    if value > high:
        return RiskLevel.HIGH.value
    if value > medium:
        return RiskLevel.MEDIUM.value
    return RiskLevel.LOW.value


def risk_level_for_score(score: int) -> RiskLevel:
    for upper, level in RISK_LEVELS:
        if score <= upper:
            return level
    return RiskLevel.VERY_HIGH


def calculate_risk_metrics(terms: ProjectTerms) -> RiskAssessment:
    """
    Score the investment risk of a project.

    Args:
        terms: Project commercial terms

    Returns:
        RiskAssessment with the total score, its level, and a per-rule label
    """
    terms.validate()

    spread = terms.irr - terms.apr
    size_flagged = (
        terms.total_price > LARGE_PROJECT_PRICE
        or terms.total_price < SMALL_PROJECT_PRICE
    )

    score = (
        _points(terms.apr, APR_POINTS)
        + _points(spread, SPREAD_POINTS)
        + _points(terms.value_growth, GROWTH_POINTS)
        + (1 if size_flagged else 0)
    )

    return RiskAssessment(
        risk_score=score,
        risk_level=risk_level_for_score(score),
        factors={
            "apr_risk": _label(terms.apr),
            "spread_risk": _label(spread),
            "growth_risk": _label(terms.value_growth),
            "size_risk": RiskLevel.HIGH.value if size_flagged else RiskLevel.LOW.value,
        },
    )
