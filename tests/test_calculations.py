"""
Tests for the individual calculation stages.
"""

import pytest

from property_analysis.calculations import AnalysisInput, Recommendation, RentableRoom
from property_analysis.calculations.amortization import calculate_monthly_payment, calculate_pmi
from property_analysis.calculations.expenses import calculate_monthly_operating_expenses
from property_analysis.calculations.income import (
    calculate_cap_rate,
    calculate_cash_on_cash_return,
    calculate_dscr,
    calculate_noi,
    calculate_roi,
    calculate_room_rent,
    sanitize_vacancy_rate,
)
from property_analysis.calculations.irr import calculate_irr, calculate_npv
from property_analysis.calculations.projections import (
    generate_annual_projections,
    generate_monthly_projections,
)
from property_analysis.calculations.recommendation import (
    generate_recommendation,
    recommendation_for_score,
)
from property_analysis.calculations.rounding import round_half_up


class TestRounding:
    """Test cent rounding."""

    def test_half_rounds_away_from_zero(self):
        """Test halves round up where round() would round to even."""
        assert round_half_up(2.675) == 2.68
        assert round_half_up(0.125) == 0.13
        assert round_half_up(-2.675) == -2.68

    def test_places(self):
        """Test rounding to a different number of places."""
        assert round_half_up(10.4166, 1) == 10.4
        assert round_half_up(10.45, 1) == 10.5


class TestAmortization:
    """Test mortgage payment and PMI calculations."""

    def test_thirty_year_payment(self):
        """Test standard 30-year mortgage payment."""
        assert calculate_monthly_payment(120000, 7.5, 30) == pytest.approx(839.06, abs=0.005)

    def test_fifteen_year_payment(self):
        """Test 15-year mortgage payment."""
        assert calculate_monthly_payment(120000, 7.5, 15) == pytest.approx(1112.41, abs=0.005)

    def test_zero_interest_rate(self):
        """Test zero rate falls back to straight-line division."""
        assert calculate_monthly_payment(120000, 0, 30) == pytest.approx(333.33, abs=0.005)

    def test_degenerate_loans_return_zero(self):
        """Test no principal, negative rate and no term all give 0."""
        assert calculate_monthly_payment(0, 7.5, 30) == 0
        assert calculate_monthly_payment(-5000, 7.5, 30) == 0
        assert calculate_monthly_payment(120000, -1, 30) == 0
        assert calculate_monthly_payment(120000, 7.5, 0) == 0

    def test_payment_is_rounded_to_cents(self):
        """Test payment carries at most two decimals."""
        payment = calculate_monthly_payment(187654, 6.875, 30)
        assert payment == round_half_up(payment)

    def test_pmi(self):
        """Test PMI as a flat monthly charge."""
        assert calculate_pmi(120000, 0.5) == pytest.approx(50.0)

    def test_pmi_zero_or_negative_rate(self):
        """Test PMI is 0 without a positive rate."""
        assert calculate_pmi(120000, 0) == 0
        assert calculate_pmi(120000, -0.5) == 0


class TestExpenses:
    """Test operating expense aggregation."""

    def test_monthly_operating_expenses(self, sample_input):
        """Test annual items are spread monthly and added to monthly items."""
        # (1800 + 800) / 12 + 150 + 100 + 0 + 0 + 50
        assert calculate_monthly_operating_expenses(sample_input) == pytest.approx(516.67)

    def test_no_expenses(self):
        """Test inputs without expenses give 0."""
        inputs = AnalysisInput(
            purchase_price=150000, down_payment=30000, interest_rate=7.5, loan_term=30
        )
        assert calculate_monthly_operating_expenses(inputs) == 0

    def test_none_expenses_count_as_zero(self):
        """Test explicit None values are treated as 0."""
        inputs = AnalysisInput(
            purchase_price=150000,
            down_payment=30000,
            interest_rate=7.5,
            loan_term=30,
            property_taxes=None,
            insurance=1200,
            hoa_fees=None,
            utilities=75,
        )
        assert calculate_monthly_operating_expenses(inputs) == pytest.approx(175.0)


class TestIncome:
    """Test income, NOI and ratio calculations."""

    @pytest.mark.parametrize("value", [None, "", float("nan"), -1, 2, "n/a"])
    def test_invalid_vacancy_defaults_to_five_percent(self, value):
        """Test every invalid vacancy rate falls back to 5%."""
        assert sanitize_vacancy_rate(value) == 0.05

    @pytest.mark.parametrize("value,expected", [(0, 0.0), (1, 1.0), (0.08, 0.08), ("0.1", 0.1)])
    def test_valid_vacancy_is_kept(self, value, expected):
        """Test valid vacancy rates, including bounds, pass through."""
        assert sanitize_vacancy_rate(value) == expected

    def test_room_rent(self):
        """Test weekly room rates convert at four weeks a month."""
        rooms = [
            RentableRoom(room_number=1, weekly_rate=150),
            RentableRoom(room_number=2, weekly_rate=175),
            RentableRoom(room_number=3, weekly_rate=125),
        ]
        assert calculate_room_rent(rooms) == 1800
        assert calculate_room_rent([]) == 0

    def test_noi(self):
        """Test annual NOI."""
        # (1500 * 0.95 - 500) * 12
        assert calculate_noi(1500, 0.05, 500) == pytest.approx(11100)

    def test_noi_full_vacancy(self):
        """Test NOI at 100% vacancy is just the expenses."""
        assert calculate_noi(1500, 1.0, 500) == pytest.approx(-6000)

    def test_cap_rate(self):
        """Test cap rate as percentage of price."""
        assert calculate_cap_rate(12000, 150000) == pytest.approx(8.0)
        assert calculate_cap_rate(-6000, 150000) == pytest.approx(-4.0)

    def test_cap_rate_zero_price(self):
        """Test cap rate is 0 for a zero price."""
        assert calculate_cap_rate(12000, 0) == 0

    def test_roi(self):
        """Test ROI against cash invested."""
        assert calculate_roi(6000, 30000) == pytest.approx(20.0)
        assert calculate_roi(-3000, 30000) == pytest.approx(-10.0)
        assert calculate_roi(6000, 0) == 0

    def test_cash_on_cash_matches_roi(self):
        """Test cash-on-cash return is the ROI formula."""
        assert calculate_cash_on_cash_return(4321, 27000) == calculate_roi(4321, 27000)

    def test_dscr(self):
        """Test debt service coverage ratio."""
        assert calculate_dscr(12000, 10000) == pytest.approx(1.2)
        assert calculate_dscr(12000, 0) == 0


class TestProjections:
    """Test monthly and annual projections."""

    def test_monthly_projection_rows(self):
        """Test twelve flat months with a running cumulative."""
        rows = generate_monthly_projections(1500, 0.05, 516.67, 839.06)

        assert [row.month for row in rows] == list(range(1, 13))
        assert all(row.year == 1 for row in rows)
        assert rows[0].vacancy_loss == pytest.approx(75.0)
        assert rows[0].effective_gross_income == pytest.approx(1425.0)
        assert rows[0].net_operating_income == pytest.approx(908.33)
        assert rows[0].cash_flow == pytest.approx(69.27)
        assert rows[5].cumulative_cash_flow == pytest.approx(69.27 * 6, abs=0.01)
        assert rows[11].cumulative_cash_flow == pytest.approx(831.24, abs=0.01)

    def test_annual_projection_first_year(self):
        """Test year 1 uses starting rent and value with one year of paydown."""
        rows = generate_annual_projections(
            gross_rent=1500,
            vacancy_rate=0.05,
            purchase_price=150000,
            down_payment=30000,
            loan_term=30,
            annual_operating_expenses=6200.04,
            annual_debt_service=10068.72,
        )
        first = rows[0]

        assert len(rows) == 30
        assert first.gross_rent == pytest.approx(18000)
        assert first.vacancy_loss == pytest.approx(900)
        assert first.net_operating_income == pytest.approx(10899.96)
        assert first.cash_flow == pytest.approx(831.24)
        assert first.property_value == pytest.approx(150000)
        # 150000 - (120000 - 120000 / 30)
        assert first.equity == pytest.approx(34000)
        # Baseline is purchase price minus down payment, not cash invested
        assert first.total_return == pytest.approx(831.24 + 34000 - 120000)
        assert first.roi == pytest.approx(-70.97)

    def test_annual_projection_growth(self):
        """Test rent and value compound from year 2."""
        rows = generate_annual_projections(1500, 0.05, 150000, 30000, 30, 6200.04, 10068.72)

        assert rows[1].gross_rent == pytest.approx(18450)
        assert rows[1].property_value == pytest.approx(154500)
        assert rows[4].property_value == pytest.approx(150000 * 1.03 ** 4, abs=0.01)

    def test_annual_running_totals(self):
        """Test cumulative cash flow, equity and total return carry across years."""
        rows = generate_annual_projections(1500, 0.05, 150000, 30000, 30, 6200.04, 10068.72)

        running = 0.0
        for row in rows:
            running += row.cash_flow
            assert row.cumulative_cash_flow == pytest.approx(running, abs=0.1)

        # Vacancy tracks the grown rent
        assert rows[1].vacancy_loss == pytest.approx(18450 * 0.05)
        assert rows[1].cash_flow > rows[0].cash_flow

        year_10 = rows[9]
        # 150000 * 1.03^9 less the balance after ten 4000 paydowns
        assert year_10.equity == pytest.approx(150000 * 1.03 ** 9 - 80000, abs=0.01)
        assert year_10.total_return == pytest.approx(
            year_10.cumulative_cash_flow + year_10.equity - 120000, abs=0.02
        )
        assert year_10.roi == pytest.approx(year_10.total_return / 120000 * 100, abs=0.01)

    def test_linear_paydown_reaches_zero(self):
        """Test the balance is gone after the loan term."""
        rows = generate_annual_projections(1500, 0.05, 150000, 30000, 15, 6200.04, 10068.72)

        assert rows[14].equity == rows[14].property_value
        assert rows[29].equity == rows[29].property_value

    def test_cash_purchase_roi_is_zero(self):
        """Test per-year ROI is 0 when nothing was borrowed."""
        rows = generate_annual_projections(1500, 0.05, 150000, 150000, 30, 6200.04, 0)

        assert all(row.roi == 0 for row in rows)
        assert rows[0].equity == pytest.approx(150000)

    def test_zero_term_retires_balance(self):
        """Test a zero loan term leaves no balance."""
        rows = generate_annual_projections(1500, 0.05, 150000, 30000, 0, 6200.04, 0)

        assert rows[0].equity == pytest.approx(150000)


class TestDiscountedCashFlow:
    """Test NPV and IRR calculations."""

    def test_npv(self):
        """Test NPV of five equal flows."""
        npv = calculate_npv(30000, [5000, 5000, 5000, 5000, 5000], 0.08)
        assert npv == pytest.approx(-10036.45, abs=0.01)

    def test_npv_negative_flows(self):
        """Test NPV with outflows every year."""
        npv = calculate_npv(30000, [-1000, -1000, -1000, -1000, -1000], 0.08)
        assert npv < -30000

    def test_npv_default_rate_is_eight_percent(self):
        """Test the default discount rate."""
        assert calculate_npv(1000, [1080]) == pytest.approx(0)

    def test_npv_invalid_rate(self):
        """Test discount rate of -100% is rejected."""
        with pytest.raises(ValueError):
            calculate_npv(1000, [500], -1)

    def test_irr_single_period(self):
        """Test 100 in, 110 back after a year is 10%."""
        assert calculate_irr(100, [110]) == pytest.approx(10.0)

    def test_irr_positive_flows(self):
        """Test IRR for a level annuity."""
        irr = calculate_irr(30000, [8000, 8000, 8000, 8000, 8000])
        assert irr is not None
        assert 10 < irr < 11

    def test_irr_negative_return(self):
        """Test IRR below zero when the money is not recovered."""
        irr = calculate_irr(100, [40, 40, 10])
        assert irr is not None
        assert irr < 0

    def test_irr_no_solution(self):
        """Test all-negative flows give no IRR instead of an error."""
        assert calculate_irr(30000, [-1000, -1000, -1000, -1000, -1000]) is None

    def test_irr_no_cash_flows(self):
        """Test an empty series stops on the zero derivative."""
        assert calculate_irr(30000, []) is None


class TestRecommendation:
    """Test the recommendation scorer."""

    def test_buy(self):
        """Test excellent metrics earn a BUY."""
        result = generate_recommendation(15, 8, 300, 1.5, 10000)

        assert result.recommendation == Recommendation.BUY
        assert result.score == 100
        assert list(result.reasons) == [
            "Excellent ROI of 15.0%",
            "Strong monthly cash flow of $300.00",
            "Excellent cap rate of 8.0%",
            "Strong debt coverage ratio of 1.50",
            "Positive NPV of $10,000.00",
        ]

    def test_fail(self):
        """Test poor metrics FAIL."""
        result = generate_recommendation(2, 3, -100, 0.8, -5000)

        assert result.recommendation == Recommendation.FAIL
        assert result.score < 60
        assert result.score == 15
        assert len(result.reasons) == 5

    def test_consider(self):
        """Test middling metrics land on CONSIDER."""
        result = generate_recommendation(8, 6, 100, 1.2, 0)

        assert result.recommendation == Recommendation.CONSIDER
        assert 60 <= result.score < 80
        assert result.reasons[4] == "Negative NPV of $0.00"

    def test_band_edges(self):
        """Test the boundary of each band."""
        result = generate_recommendation(0, 0, -50, 1.0, 0)

        assert result.score == 5 + 5
        assert result.reasons[0] == "Negative ROI of 0.0%"
        assert result.reasons[1] == "Near break-even cash flow of $-50.00"
        assert result.reasons[2] == "Poor cap rate of 0.0%"
        assert result.reasons[3] == "Adequate debt coverage ratio of 1.00"

    def test_worst_case_scores_zero(self):
        """Test nothing scores when everything is negative."""
        result = generate_recommendation(-5, -1, -500, 0, -1)

        assert result.score == 0
        assert result.recommendation == Recommendation.FAIL
        assert len(result.reasons) == 5

    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, Recommendation.BUY),
            (80, Recommendation.BUY),
            (79, Recommendation.CONSIDER),
            (60, Recommendation.CONSIDER),
            (59, Recommendation.FAIL),
            (0, Recommendation.FAIL),
        ],
    )
    def test_recommendation_for_score(self, score, expected):
        """Test score thresholds."""
        assert recommendation_for_score(score) == expected

    def test_reasons_are_finite_text(self):
        """Test reasons render even for extreme inputs."""
        result = generate_recommendation(1e6, 1e6, 1e9, 1e3, 1e12)
        assert result.score == 100
        assert all(isinstance(reason, str) and reason for reason in result.reasons)
