"""
Value types passed into and out of the analysis engine.
"""

import enum
import re
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, List, Mapping, Optional, Tuple

from property_analysis.calculations.defaults import DEFAULT_VACANCY_RATE


class Recommendation(str, enum.Enum):
    """Investment verdict derived from the recommendation score."""
    BUY = "BUY"
    CONSIDER = "CONSIDER"
    FAIL = "FAIL"


@dataclass(frozen=True)
class RentableRoom:
    """A room let individually at a weekly rate."""

    room_number: int
    weekly_rate: float


def _to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass(frozen=True)
class AnalysisInput:
    """
    Property, financing, income and expense figures for one analysis.

    Rates are percentages (7.5 means 7.5%) except vacancy_rate, which is
    a fraction. Taxes and insurance are annual; the other operating
    expenses are monthly. Optional fields may be None; normalize_input()
    swaps None for the defaults declared here.
    """

    # Purchase and financing
    purchase_price: float
    down_payment: float
    interest_rate: float
    loan_term: float
    closing_costs: Optional[float] = 0.0
    pmi_rate: Optional[float] = 0.0

    # Rental income (gross_rent None means "derive from rentable_rooms")
    gross_rent: Optional[float] = None
    vacancy_rate: Any = DEFAULT_VACANCY_RATE
    rentable_rooms: Tuple[RentableRoom, ...] = ()

    # Annual expenses
    property_taxes: Optional[float] = 0.0
    insurance: Optional[float] = 0.0

    # Monthly expenses
    property_mgmt: Optional[float] = 0.0
    maintenance: Optional[float] = 0.0
    utilities: Optional[float] = 0.0
    hoa_fees: Optional[float] = 0.0
    equipment: Optional[float] = 0.0

    # One-time
    rehab_costs: Optional[float] = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisInput":
        """
        Build an input from a mapping with snake_case or camelCase keys.

        Keys that are not input fields are ignored. Missing required
        fields raise TypeError.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _to_snake(key)
            if name in known:
                kwargs[name] = value

        rooms = kwargs.pop("rentable_rooms", None) or ()
        kwargs["rentable_rooms"] = tuple(
            room if isinstance(room, RentableRoom) else RentableRoom(
                room_number=room.get("room_number", room.get("roomNumber")),
                weekly_rate=room.get("weekly_rate", room.get("weeklyRate", 0)),
            )
            for room in rooms
        )
        return cls(**kwargs)


@dataclass(frozen=True)
class MonthlyProjection:
    """One month of the first-year projection."""

    month: int
    year: int
    gross_rent: float
    vacancy_loss: float
    effective_gross_income: float
    operating_expenses: float
    net_operating_income: float
    debt_service: float
    cash_flow: float
    cumulative_cash_flow: float


@dataclass(frozen=True)
class AnnualProjection:
    """One year of the long-range projection."""

    year: int
    gross_rent: float
    vacancy_loss: float
    effective_gross_income: float
    operating_expenses: float
    net_operating_income: float
    debt_service: float
    cash_flow: float
    cumulative_cash_flow: float
    property_value: float
    equity: float
    total_return: float
    roi: float


@dataclass(frozen=True)
class RecommendationResult:
    """Scorer output: verdict, score out of 100 and one reason per band."""

    recommendation: Recommendation
    score: int
    reasons: Tuple[str, ...]


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the engine reports for one analysis."""

    # Monthly metrics
    monthly_payment: float
    monthly_mortgage_payment: float
    monthly_pmi: float
    monthly_cash_flow: float
    monthly_operating_expenses: float

    # Annual metrics
    annual_cash_flow: float
    net_operating_income: float
    effective_gross_income: float
    total_annual_expenses: float

    # Ratios
    roi: float
    cap_rate: float
    cash_on_cash_return: float
    debt_service_coverage_ratio: float

    # Investment
    total_cash_invested: float
    loan_amount: float
    npv: float
    irr: Optional[float]

    # Recommendation
    recommendation: Recommendation
    recommendation_score: int
    recommendation_reasons: Tuple[str, ...]

    # Projections
    monthly_projections: Tuple[MonthlyProjection, ...] = field(default=())
    annual_projections: Tuple[AnnualProjection, ...] = field(default=())

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable representation."""
        data = asdict(self)
        data["recommendation"] = self.recommendation.value
        data["recommendation_reasons"] = list(self.recommendation_reasons)
        data["monthly_projections"] = projection_rows(self.monthly_projections)
        data["annual_projections"] = projection_rows(self.annual_projections)
        return data


def projection_rows(projections) -> List[Dict[str, Any]]:
    """Flatten projection dataclasses to dicts (for tables and CSV-like output)."""
    return [asdict(p) for p in projections]
