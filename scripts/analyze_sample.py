"""
Print an analysis of a sample single-family rental.

Usage:
    python scripts/analyze_sample.py
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from property_analysis.calculations import AnalysisInput, analyze

SAMPLE_PROPERTY = AnalysisInput(
    purchase_price=150000,
    down_payment=30000,
    interest_rate=7.5,
    loan_term=30,
    closing_costs=3000,
    pmi_rate=0,
    gross_rent=1500,
    vacancy_rate=0.05,
    property_taxes=1800,
    insurance=800,
    property_mgmt=150,
    maintenance=100,
    utilities=0,
    hoa_fees=0,
    equipment=50,
    rehab_costs=0,
)


def main():
    result = analyze(SAMPLE_PROPERTY)

    print(f"Monthly payment:        ${result.monthly_payment:,.2f}")
    print(f"Monthly expenses:       ${result.monthly_operating_expenses:,.2f}")
    print(f"Monthly cash flow:      ${result.monthly_cash_flow:,.2f}")
    print(f"NOI:                    ${result.net_operating_income:,.2f}")
    print(f"Cap rate:               {result.cap_rate:.2f}%")
    print(f"ROI / cash-on-cash:     {result.roi:.2f}%")
    print(f"DSCR:                   {result.debt_service_coverage_ratio:.2f}")
    print(f"NPV (5 yr @ 8%):        ${result.npv:,.2f}")
    irr_text = f"{result.irr:.2f}%" if result.irr is not None else "n/a"
    print(f"IRR (5 yr):             {irr_text}")
    print()
    print(f"Recommendation: {result.recommendation.value} ({result.recommendation_score}/100)")
    for reason in result.recommendation_reasons:
        print(f"  - {reason}")
    print()
    print("Year  Rent        Cash Flow   Value        Equity")
    for row in result.annual_projections:
        if row.year in (1, 5, 10, 20, 30):
            print(
                f"{row.year:>4}  {row.gross_rent:>10,.0f}  {row.cash_flow:>10,.0f}"
                f"  {row.property_value:>11,.0f}  {row.equity:>11,.0f}"
            )


if __name__ == "__main__":
    main()
