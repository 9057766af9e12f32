"""
Loan Payment Calculations

Monthly mortgage payment (Excel PMT equivalent) and flat monthly PMI.
Rates are annual percentages, e.g. 7.5 for 7.5%.
"""

from property_analysis.calculations.defaults import MONTHS_PER_YEAR
from property_analysis.calculations.rounding import round_half_up


def calculate_monthly_payment(
    loan_amount: float, annual_rate: float, term_years: float
) -> float:
    """
    Calculate the monthly principal and interest payment.

    P&I = L * r(1 + r)^n / ((1 + r)^n - 1)

    Args:
        loan_amount: Loan principal
        annual_rate: Annual interest rate as a percentage (e.g., 7.5)
        term_years: Loan term in years

    Returns:
        Monthly payment rounded to the cent, or 0 for a degenerate loan
        (no principal, no term, or a negative rate)
    """
    if loan_amount <= 0 or term_years <= 0 or annual_rate < 0:
        return 0.0

    number_of_payments = term_years * MONTHS_PER_YEAR

    if annual_rate == 0:
        return round_half_up(loan_amount / number_of_payments)

    monthly_rate = annual_rate / 100 / MONTHS_PER_YEAR
    growth = (1 + monthly_rate) ** number_of_payments

    payment = loan_amount * monthly_rate * growth / (growth - 1)

    return round_half_up(payment)


def calculate_pmi(loan_amount: float, pmi_rate: float) -> float:
    """
    Calculate monthly private mortgage insurance.

    PMI is a flat charge on the original loan amount, not amortized.
    """
    if pmi_rate <= 0:
        return 0.0
    return round_half_up(loan_amount * (pmi_rate / 100) / MONTHS_PER_YEAR)
