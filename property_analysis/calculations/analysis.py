"""
Property Analysis

Normalizes an AnalysisInput once and runs every calculation stage in
dependency order: payment, expenses, income and ratios, projections,
NPV/IRR, recommendation.
"""

import logging
from dataclasses import replace
from typing import Any, Mapping, Union

from property_analysis.calculations.amortization import (
    calculate_monthly_payment,
    calculate_pmi,
)
from property_analysis.calculations.defaults import MONTHS_PER_YEAR, NPV_HORIZON_YEARS
from property_analysis.calculations.expenses import calculate_monthly_operating_expenses
from property_analysis.calculations.income import (
    calculate_cap_rate,
    calculate_cash_on_cash_return,
    calculate_dscr,
    calculate_effective_gross_income,
    calculate_monthly_cash_flow,
    calculate_noi,
    calculate_roi,
    calculate_room_rent,
    sanitize_vacancy_rate,
)
from property_analysis.calculations.irr import calculate_irr, calculate_npv
from property_analysis.calculations.models import AnalysisInput, AnalysisResult
from property_analysis.calculations.projections import (
    generate_annual_projections,
    generate_monthly_projections,
)
from property_analysis.calculations.recommendation import generate_recommendation
from property_analysis.calculations.rounding import round_half_up

logger = logging.getLogger(__name__)

OPTIONAL_AMOUNT_FIELDS = (
    "closing_costs",
    "pmi_rate",
    "property_taxes",
    "insurance",
    "property_mgmt",
    "maintenance",
    "utilities",
    "hoa_fees",
    "equipment",
    "rehab_costs",
)


def normalize_input(inputs: AnalysisInput) -> AnalysisInput:
    """
    Return a copy of inputs with every default applied.

    - optional amounts that are None become 0
    - vacancy_rate is sanitized (5% when missing or invalid)
    - gross_rent, when missing, is derived from rentable_rooms
    """
    amounts = {
        name: float(getattr(inputs, name) or 0) for name in OPTIONAL_AMOUNT_FIELDS
    }

    gross_rent = inputs.gross_rent
    if gross_rent is None:
        gross_rent = calculate_room_rent(inputs.rentable_rooms)

    return replace(
        inputs,
        gross_rent=float(gross_rent),
        vacancy_rate=sanitize_vacancy_rate(inputs.vacancy_rate),
        **amounts,
    )


def analyze(inputs: Union[AnalysisInput, Mapping[str, Any]]) -> AnalysisResult:
    """
    Run a complete property analysis.

    Args:
        inputs: AnalysisInput, or a mapping accepted by AnalysisInput.from_dict

    Returns:
        A new AnalysisResult. The function is pure: equal inputs give
        equal results.
    """
    if not isinstance(inputs, AnalysisInput):
        inputs = AnalysisInput.from_dict(inputs)
    inputs = normalize_input(inputs)

    vacancy_rate = inputs.vacancy_rate
    gross_rent = inputs.gross_rent

    # === FINANCING ===
    loan_amount = inputs.purchase_price - inputs.down_payment
    mortgage_payment = calculate_monthly_payment(
        loan_amount, inputs.interest_rate, inputs.loan_term
    )
    pmi_payment = calculate_pmi(loan_amount, inputs.pmi_rate)
    total_monthly_payment = mortgage_payment + pmi_payment
    annual_debt_service = total_monthly_payment * MONTHS_PER_YEAR

    # === EXPENSES ===
    monthly_operating_expenses = calculate_monthly_operating_expenses(inputs)
    total_annual_expenses = monthly_operating_expenses * MONTHS_PER_YEAR

    # === INCOME & RATIOS ===
    effective_gross_income = calculate_effective_gross_income(gross_rent, vacancy_rate)
    noi = calculate_noi(gross_rent, vacancy_rate, monthly_operating_expenses)
    monthly_cash_flow = calculate_monthly_cash_flow(
        gross_rent, vacancy_rate, monthly_operating_expenses, total_monthly_payment
    )
    annual_cash_flow = monthly_cash_flow * MONTHS_PER_YEAR

    total_cash_invested = (
        inputs.down_payment + inputs.closing_costs + inputs.rehab_costs
    )
    roi = calculate_roi(annual_cash_flow, total_cash_invested)
    cash_on_cash_return = calculate_cash_on_cash_return(
        annual_cash_flow, total_cash_invested
    )
    cap_rate = calculate_cap_rate(noi, inputs.purchase_price)
    dscr = calculate_dscr(noi, annual_debt_service)

    # === PROJECTIONS ===
    monthly_projections = generate_monthly_projections(
        gross_rent, vacancy_rate, monthly_operating_expenses, total_monthly_payment
    )
    annual_projections = generate_annual_projections(
        gross_rent=gross_rent,
        vacancy_rate=vacancy_rate,
        purchase_price=inputs.purchase_price,
        down_payment=inputs.down_payment,
        loan_term=inputs.loan_term,
        annual_operating_expenses=total_annual_expenses,
        annual_debt_service=annual_debt_service,
    )

    # === DISCOUNTED CASH FLOW ===
    horizon_cash_flows = [p.cash_flow for p in annual_projections[:NPV_HORIZON_YEARS]]
    npv = calculate_npv(total_cash_invested, horizon_cash_flows)
    irr = calculate_irr(total_cash_invested, horizon_cash_flows)

    # === RECOMMENDATION ===
    verdict = generate_recommendation(roi, cap_rate, monthly_cash_flow, dscr, npv)

    logger.debug(
        "Analysis complete: price=%s cash_flow=%.2f roi=%.2f score=%d (%s)",
        inputs.purchase_price,
        monthly_cash_flow,
        roi,
        verdict.score,
        verdict.recommendation.value,
    )

    return AnalysisResult(
        monthly_payment=round_half_up(total_monthly_payment),
        monthly_mortgage_payment=mortgage_payment,
        monthly_pmi=pmi_payment,
        monthly_cash_flow=round_half_up(monthly_cash_flow),
        monthly_operating_expenses=monthly_operating_expenses,
        annual_cash_flow=round_half_up(annual_cash_flow),
        net_operating_income=noi,
        effective_gross_income=round_half_up(effective_gross_income),
        total_annual_expenses=round_half_up(total_annual_expenses),
        roi=roi,
        cap_rate=cap_rate,
        cash_on_cash_return=cash_on_cash_return,
        debt_service_coverage_ratio=dscr,
        total_cash_invested=round_half_up(total_cash_invested),
        loan_amount=round_half_up(loan_amount),
        npv=npv,
        irr=irr,
        recommendation=verdict.recommendation,
        recommendation_score=verdict.score,
        recommendation_reasons=verdict.reasons,
        monthly_projections=tuple(monthly_projections),
        annual_projections=tuple(annual_projections),
    )
