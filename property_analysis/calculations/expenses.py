"""
Operating Expense Calculations
"""

from property_analysis.calculations.defaults import MONTHS_PER_YEAR
from property_analysis.calculations.models import AnalysisInput
from property_analysis.calculations.rounding import round_half_up


def calculate_monthly_operating_expenses(inputs: AnalysisInput) -> float:
    """
    Calculate total monthly operating expenses.

    Property taxes and insurance are annual and get spread over twelve
    months; the remaining expenses are already monthly. Missing values
    count as zero.
    """
    total = (
        (inputs.property_taxes or 0) / MONTHS_PER_YEAR
        + (inputs.insurance or 0) / MONTHS_PER_YEAR
        + (inputs.property_mgmt or 0)
        + (inputs.maintenance or 0)
        + (inputs.utilities or 0)
        + (inputs.hoa_fees or 0)
        + (inputs.equipment or 0)
    )
    return round_half_up(total)
