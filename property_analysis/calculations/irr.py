"""
IRR and NPV Calculations

NPV by discounting annual cash flows, IRR by Newton-Raphson.
Cash flows start at the end of year 1; the initial investment sits at
year 0 and is passed separately.
"""

import logging
import math
from typing import List, Optional

from property_analysis.calculations.defaults import (
    DISCOUNT_RATE,
    IRR_GUESS,
    IRR_MAX_ITERATIONS,
    IRR_TOLERANCE,
)
from property_analysis.calculations.rounding import round_half_up

logger = logging.getLogger(__name__)


def _discounted_npv(
    initial_investment: float, cash_flows: List[float], rate: float
) -> float:
    npv = -initial_investment
    for year, cf in enumerate(cash_flows):
        npv += cf / ((1 + rate) ** (year + 1))
    return npv


def _npv_derivative(cash_flows: List[float], rate: float) -> float:
    """Calculate derivative of NPV with respect to rate (for Newton-Raphson)."""
    dnpv = 0.0
    for year, cf in enumerate(cash_flows):
        period = year + 1
        dnpv -= (period * cf) / ((1 + rate) ** (period + 1))
    return dnpv


def calculate_npv(
    initial_investment: float,
    cash_flows: List[float],
    discount_rate: float = DISCOUNT_RATE,
) -> float:
    """
    Calculate NPV (Net Present Value) of an investment.

    Args:
        initial_investment: Cash put in at year 0 (positive number)
        cash_flows: Annual cash flows for years 1..n
        discount_rate: Annual discount rate as decimal (e.g., 0.08 for 8%)

    Returns:
        NPV rounded to the cent

    Raises:
        ValueError: If the discount rate is -100% or lower
    """
    if discount_rate <= -1:
        raise ValueError("Discount rate must be greater than -100%")

    return round_half_up(_discounted_npv(initial_investment, cash_flows, discount_rate))


def calculate_irr(
    initial_investment: float,
    cash_flows: List[float],
    guess: float = IRR_GUESS,
) -> Optional[float]:
    """
    Calculate IRR (Internal Rate of Return) using Newton-Raphson method.

    Args:
        initial_investment: Cash put in at year 0 (positive number)
        cash_flows: Annual cash flows for years 1..n
        guess: Initial guess for rate (default 0.1 = 10%)

    Returns:
        IRR as a percentage (e.g., 10.42), or None when the search does
        not converge. Some cash flow shapes have no real IRR; that is an
        answer, not an error.
    """
    rate = guess

    for iteration in range(IRR_MAX_ITERATIONS):
        try:
            npv = _discounted_npv(initial_investment, cash_flows, rate)
            dnpv = _npv_derivative(cash_flows, rate)
        except (OverflowError, ZeroDivisionError):
            logger.debug("IRR search left the float range at iteration %d", iteration)
            return None

        if abs(npv) < IRR_TOLERANCE:
            return round_half_up(rate * 100)

        if dnpv == 0:
            logger.debug("IRR search stopped: zero derivative at rate %s", rate)
            return None

        rate = rate - npv / dnpv

        if not math.isfinite(rate):
            logger.debug("IRR search diverged at iteration %d", iteration)
            return None

    logger.debug("IRR did not converge after %d iterations", IRR_MAX_ITERATIONS)
    return None
