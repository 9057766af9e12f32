"""
Projection Calculations

Builds the first-year monthly schedule and the 30-year annual schedule.
"""

from typing import List

from property_analysis.calculations.defaults import (
    ANNUAL_PROJECTION_YEARS,
    APPRECIATION_RATE,
    MONTHLY_PROJECTION_MONTHS,
    MONTHS_PER_YEAR,
    RENT_GROWTH_RATE,
)
from property_analysis.calculations.models import AnnualProjection, MonthlyProjection
from property_analysis.calculations.rounding import round_half_up


def generate_monthly_projections(
    gross_rent: float,
    vacancy_rate: float,
    monthly_operating_expenses: float,
    monthly_debt_service: float,
) -> List[MonthlyProjection]:
    """
    Generate month-by-month figures for the first year.

    Rent, vacancy, expenses and debt service are flat across the year;
    only the cumulative cash flow moves.
    """
    projections = []
    cumulative_cash_flow = 0.0

    for month in range(1, MONTHLY_PROJECTION_MONTHS + 1):
        vacancy_loss = gross_rent * vacancy_rate
        effective_gross_income = gross_rent - vacancy_loss
        noi = effective_gross_income - monthly_operating_expenses
        cash_flow = noi - monthly_debt_service
        cumulative_cash_flow += cash_flow

        projections.append(
            MonthlyProjection(
                month=month,
                year=1,
                gross_rent=round_half_up(gross_rent),
                vacancy_loss=round_half_up(vacancy_loss),
                effective_gross_income=round_half_up(effective_gross_income),
                operating_expenses=round_half_up(monthly_operating_expenses),
                net_operating_income=round_half_up(noi),
                debt_service=round_half_up(monthly_debt_service),
                cash_flow=round_half_up(cash_flow),
                cumulative_cash_flow=round_half_up(cumulative_cash_flow),
            )
        )

    return projections


def generate_annual_projections(
    gross_rent: float,
    vacancy_rate: float,
    purchase_price: float,
    down_payment: float,
    loan_term: float,
    annual_operating_expenses: float,
    annual_debt_service: float,
) -> List[AnnualProjection]:
    """
    Generate year-by-year figures over the long-range horizon.

    Rent grows 2.5% and property value 3% a year, compounding from
    year 2. Expenses and debt service stay flat.

    The loan balance drops by loan_amount / loan_term every year. This is
    a straight-line approximation, not the annuity schedule behind the
    monthly payment, and the two are kept separate on purpose.

    total_return and roi are measured against purchase_price - down_payment
    (purchase_equity_baseline), not against total cash invested.

    Args:
        gross_rent: Monthly gross rent in year 1
        vacancy_rate: Vacancy as a fraction
        purchase_price: Purchase price (year 1 property value)
        down_payment: Down payment
        loan_term: Loan term in years
        annual_operating_expenses: Operating expenses per year
        annual_debt_service: Mortgage plus PMI per year

    Returns:
        List of annual projection rows, year 1 first
    """
    projections = []

    loan_amount = purchase_price - down_payment
    purchase_equity_baseline = purchase_price - down_payment

    if loan_term > 0:
        annual_principal_payment = loan_amount / loan_term
    else:
        # No term: the balance is retired in the first year
        annual_principal_payment = loan_amount

    current_rent = gross_rent * MONTHS_PER_YEAR
    current_property_value = purchase_price
    remaining_loan_balance = loan_amount
    cumulative_cash_flow = 0.0

    for year in range(1, ANNUAL_PROJECTION_YEARS + 1):
        vacancy_loss = current_rent * vacancy_rate
        effective_gross_income = current_rent - vacancy_loss
        noi = effective_gross_income - annual_operating_expenses
        cash_flow = noi - annual_debt_service
        cumulative_cash_flow += cash_flow

        remaining_loan_balance = max(0.0, remaining_loan_balance - annual_principal_payment)
        equity = current_property_value - remaining_loan_balance
        total_return = cumulative_cash_flow + equity - purchase_equity_baseline

        if purchase_equity_baseline > 0:
            roi = total_return / purchase_equity_baseline * 100
        else:
            roi = 0.0

        projections.append(
            AnnualProjection(
                year=year,
                gross_rent=round_half_up(current_rent),
                vacancy_loss=round_half_up(vacancy_loss),
                effective_gross_income=round_half_up(effective_gross_income),
                operating_expenses=round_half_up(annual_operating_expenses),
                net_operating_income=round_half_up(noi),
                debt_service=round_half_up(annual_debt_service),
                cash_flow=round_half_up(cash_flow),
                cumulative_cash_flow=round_half_up(cumulative_cash_flow),
                property_value=round_half_up(current_property_value),
                equity=round_half_up(equity),
                total_return=round_half_up(total_return),
                roi=round_half_up(roi),
            )
        )

        # Growth applies from the following year
        current_rent *= 1 + RENT_GROWTH_RATE
        current_property_value *= 1 + APPRECIATION_RATE

    return projections
