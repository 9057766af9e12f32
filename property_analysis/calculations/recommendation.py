"""
Investment Recommendation

Scores a deal out of 100 across five independent bands and turns the
score into BUY / CONSIDER / FAIL. Every band is always evaluated and
always contributes exactly one reason.
"""

from typing import List, Tuple

from property_analysis.calculations.defaults import (
    BUY_SCORE_THRESHOLD,
    CONSIDER_SCORE_THRESHOLD,
)
from property_analysis.calculations.models import Recommendation, RecommendationResult


def _score_roi(roi: float) -> Tuple[int, str]:
    # 40 points
    if roi >= 12:
        return 40, f"Excellent ROI of {roi:.1f}%"
    if roi >= 8:
        return 30, f"Good ROI of {roi:.1f}%"
    if roi >= 6:
        return 20, f"Moderate ROI of {roi:.1f}%"
    if roi > 0:
        return 10, f"Low ROI of {roi:.1f}%"
    return 0, f"Negative ROI of {roi:.1f}%"


def _score_cash_flow(cash_flow: float) -> Tuple[int, str]:
    # 25 points
    if cash_flow >= 200:
        return 25, f"Strong monthly cash flow of ${cash_flow:.2f}"
    if cash_flow >= 100:
        return 20, f"Good monthly cash flow of ${cash_flow:.2f}"
    if cash_flow > 0:
        return 15, f"Positive cash flow of ${cash_flow:.2f}"
    if cash_flow >= -50:
        return 5, f"Near break-even cash flow of ${cash_flow:.2f}"
    return 0, f"Negative cash flow of ${cash_flow:.2f}"


def _score_cap_rate(cap_rate: float) -> Tuple[int, str]:
    # 20 points
    if cap_rate >= 8:
        return 20, f"Excellent cap rate of {cap_rate:.1f}%"
    if cap_rate >= 6:
        return 15, f"Good cap rate of {cap_rate:.1f}%"
    if cap_rate >= 4:
        return 10, f"Moderate cap rate of {cap_rate:.1f}%"
    if cap_rate > 0:
        return 5, f"Low cap rate of {cap_rate:.1f}%"
    return 0, f"Poor cap rate of {cap_rate:.1f}%"


def _score_dscr(dscr: float) -> Tuple[int, str]:
    # 10 points
    if dscr >= 1.5:
        return 10, f"Strong debt coverage ratio of {dscr:.2f}"
    if dscr >= 1.25:
        return 8, f"Good debt coverage ratio of {dscr:.2f}"
    if dscr >= 1.0:
        return 5, f"Adequate debt coverage ratio of {dscr:.2f}"
    return 0, f"Poor debt coverage ratio of {dscr:.2f}"


def _score_npv(npv: float) -> Tuple[int, str]:
    # 5 points
    if npv > 0:
        return 5, f"Positive NPV of ${npv:,.2f}"
    return 0, f"Negative NPV of ${npv:,.2f}"


def recommendation_for_score(score: int) -> Recommendation:
    """Map a 0-100 score to a recommendation."""
    if score >= BUY_SCORE_THRESHOLD:
        return Recommendation.BUY
    if score >= CONSIDER_SCORE_THRESHOLD:
        return Recommendation.CONSIDER
    return Recommendation.FAIL


def generate_recommendation(
    roi: float,
    cap_rate: float,
    cash_flow: float,
    dscr: float,
    npv: float,
) -> RecommendationResult:
    """
    Score a deal and produce a recommendation.

    Args:
        roi: Cash-on-cash ROI as a percentage
        cap_rate: Cap rate as a percentage
        cash_flow: Monthly cash flow
        dscr: Debt service coverage ratio
        npv: Net present value

    Returns:
        RecommendationResult with reasons in band order:
        ROI, cash flow, cap rate, DSCR, NPV
    """
    bands = [
        _score_roi(roi),
        _score_cash_flow(cash_flow),
        _score_cap_rate(cap_rate),
        _score_dscr(dscr),
        _score_npv(npv),
    ]

    score = sum(points for points, _ in bands)
    reasons: List[str] = [reason for _, reason in bands]

    return RecommendationResult(
        recommendation=recommendation_for_score(score),
        score=score,
        reasons=tuple(reasons),
    )
