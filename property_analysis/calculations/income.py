"""
Income and Return Ratio Calculations

Vacancy-adjusted income, NOI, and the ratios derived from them.
Ratios with a zero or negative denominator come back as 0 rather than
raising.
"""

import math
from typing import Any, Iterable

from property_analysis.calculations.defaults import (
    DEFAULT_VACANCY_RATE,
    MONTHS_PER_YEAR,
    WEEKS_PER_MONTH,
)
from property_analysis.calculations.models import RentableRoom
from property_analysis.calculations.rounding import round_half_up


def sanitize_vacancy_rate(value: Any) -> float:
    """
    Coerce a vacancy rate to a fraction in [0, 1].

    Missing, blank, non-numeric, NaN and out-of-range values all fall
    back to the 5% default.
    """
    if value is None or value == "":
        return DEFAULT_VACANCY_RATE
    try:
        rate = float(value)
    except (TypeError, ValueError):
        return DEFAULT_VACANCY_RATE
    if math.isnan(rate) or rate < 0 or rate > 1:
        return DEFAULT_VACANCY_RATE
    return rate


def calculate_room_rent(rooms: Iterable[RentableRoom]) -> float:
    """Monthly gross rent implied by weekly room rates (four weeks a month)."""
    return sum(room.weekly_rate or 0 for room in rooms) * WEEKS_PER_MONTH


def calculate_effective_gross_income(gross_rent: float, vacancy_rate: float) -> float:
    """Annual rent collected after vacancy."""
    return gross_rent * (1 - vacancy_rate) * MONTHS_PER_YEAR


def calculate_noi(
    gross_rent: float, vacancy_rate: float, monthly_operating_expenses: float
) -> float:
    """
    Calculate annual Net Operating Income.

    Args:
        gross_rent: Monthly gross rent
        vacancy_rate: Vacancy as a fraction (e.g., 0.05)
        monthly_operating_expenses: Monthly operating expenses

    Returns:
        Annual NOI
    """
    effective_gross_income = gross_rent * (1 - vacancy_rate)
    return round_half_up(
        (effective_gross_income - monthly_operating_expenses) * MONTHS_PER_YEAR
    )


def calculate_cap_rate(noi: float, purchase_price: float) -> float:
    """Capitalization rate as a percentage of purchase price."""
    if purchase_price <= 0:
        return 0.0
    return round_half_up(noi / purchase_price * 100)


def calculate_monthly_cash_flow(
    gross_rent: float,
    vacancy_rate: float,
    monthly_operating_expenses: float,
    monthly_debt_service: float,
) -> float:
    """Monthly cash left after expenses, mortgage and PMI (unrounded)."""
    return (
        gross_rent * (1 - vacancy_rate)
        - monthly_operating_expenses
        - monthly_debt_service
    )


def calculate_roi(annual_cash_flow: float, total_cash_invested: float) -> float:
    """
    Calculate Return on Investment.

    Args:
        annual_cash_flow: Annual cash flow after debt service
        total_cash_invested: Down payment plus closing and rehab costs

    Returns:
        ROI as a percentage
    """
    if total_cash_invested <= 0:
        return 0.0
    return round_half_up(annual_cash_flow / total_cash_invested * 100)


def calculate_cash_on_cash_return(
    annual_cash_flow: float, total_cash_invested: float
) -> float:
    """Cash-on-cash return. Defined exactly as ROI."""
    return calculate_roi(annual_cash_flow, total_cash_invested)


def calculate_dscr(noi: float, annual_debt_service: float) -> float:
    """
    Calculate Debt Service Coverage Ratio (DSCR).

    Args:
        noi: Annual Net Operating Income
        annual_debt_service: Mortgage plus PMI for the year

    Returns:
        DSCR ratio, or 0 when there is no debt service
    """
    if annual_debt_service <= 0:
        return 0.0
    return round_half_up(noi / annual_debt_service)
