"""
Property Analysis Engine

Calculation modules for rental property investment analysis.
Pure functions only: no I/O, no shared state.
"""

from property_analysis.calculations import (
    amortization,
    expenses,
    income,
    projections,
    irr,
    recommendation,
)
from property_analysis.calculations.analysis import analyze, normalize_input
from property_analysis.calculations.models import (
    AnalysisInput,
    AnalysisResult,
    AnnualProjection,
    MonthlyProjection,
    Recommendation,
    RecommendationResult,
    RentableRoom,
)

__all__ = [
    "amortization",
    "expenses",
    "income",
    "projections",
    "irr",
    "recommendation",
    "analyze",
    "normalize_input",
    "AnalysisInput",
    "AnalysisResult",
    "AnnualProjection",
    "MonthlyProjection",
    "Recommendation",
    "RecommendationResult",
    "RentableRoom",
]
