"""
Financial calculation API endpoints.

These endpoints validate request payloads and hand them to the
calculation engine. Nothing here recomputes a metric.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union

from property_analysis.calculations import (
    AnalysisInput,
    RentableRoom,
    amortization,
    analyze,
    irr,
    recommendation,
)
from property_analysis.calculations.defaults import DISCOUNT_RATE
from property_analysis.calculations.rounding import round_half_up

logger = logging.getLogger(__name__)

router = APIRouter()


class CamelModel(BaseModel):
    """Accepts the camelCase keys sent by the front end as well as snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RentableRoomInput(CamelModel):
    """A room rented at a weekly rate."""

    room_number: int = Field(ge=1)
    weekly_rate: float = Field(ge=0)


class AnalysisRequest(CamelModel):
    """Input for a full property analysis."""

    # Purchase and financing
    purchase_price: float = Field(gt=0)
    down_payment: float = Field(ge=0)
    interest_rate: float = Field(ge=0)
    loan_term: float = Field(gt=0)
    closing_costs: Optional[float] = Field(default=None, ge=0)
    pmi_rate: Optional[float] = Field(default=None, ge=0)

    # Rental income
    gross_rent: Optional[float] = Field(default=None, ge=0)
    vacancy_rate: Optional[Union[float, str]] = None  # "" allowed, sanitized by the engine
    rentable_rooms: List[RentableRoomInput] = []

    # Expenses
    property_taxes: Optional[float] = Field(default=None, ge=0)
    insurance: Optional[float] = Field(default=None, ge=0)
    property_mgmt: Optional[float] = Field(default=None, ge=0)
    maintenance: Optional[float] = Field(default=None, ge=0)
    utilities: Optional[float] = Field(default=None, ge=0)
    hoa_fees: Optional[float] = Field(default=None, ge=0)
    equipment: Optional[float] = Field(default=None, ge=0)
    rehab_costs: Optional[float] = Field(default=None, ge=0)

    def to_input(self) -> AnalysisInput:
        values = self.model_dump(exclude={"rentable_rooms"})
        rooms = tuple(
            RentableRoom(room_number=room.room_number, weekly_rate=room.weekly_rate)
            for room in self.rentable_rooms
        )
        return AnalysisInput(rentable_rooms=rooms, **values)


class AnalysisResponse(BaseModel):
    """Full analysis result."""

    # Monthly
    monthly_payment: float
    monthly_mortgage_payment: float
    monthly_pmi: float
    monthly_cash_flow: float
    monthly_operating_expenses: float

    # Annual
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
    irr: Optional[float] = None

    # Recommendation
    recommendation: str
    recommendation_score: int
    recommendation_reasons: List[str]

    # Projections
    monthly_projections: List[dict]
    annual_projections: List[dict]


@router.post("/analysis", response_model=AnalysisResponse)
async def calculate_analysis(inputs: AnalysisRequest):
    """Run the full property analysis."""
    result = analyze(inputs.to_input())

    logger.info(
        "Analysis for $%s purchase: %s (score %d)",
        inputs.purchase_price,
        result.recommendation.value,
        result.recommendation_score,
    )

    return AnalysisResponse(**result.to_dict())


class PaymentInput(BaseModel):
    """Input for a mortgage payment calculation."""

    loan_amount: float
    annual_rate: float
    term_years: float
    pmi_rate: float = 0.0


class PaymentResponse(BaseModel):
    """Monthly payment breakdown."""

    monthly_payment: float
    monthly_pmi: float
    total_monthly_payment: float


@router.post("/payment", response_model=PaymentResponse)
async def calculate_payment_endpoint(inputs: PaymentInput):
    """Calculate monthly mortgage payment and PMI."""
    payment = amortization.calculate_monthly_payment(
        inputs.loan_amount, inputs.annual_rate, inputs.term_years
    )
    pmi = amortization.calculate_pmi(inputs.loan_amount, inputs.pmi_rate)

    return PaymentResponse(
        monthly_payment=payment,
        monthly_pmi=pmi,
        total_monthly_payment=round_half_up(payment + pmi),
    )


class IRRInput(BaseModel):
    """Input for IRR calculation."""

    initial_investment: float
    cash_flows: List[float]
    discount_rate: float = DISCOUNT_RATE


class IRRResponse(BaseModel):
    """Response with IRR calculation."""

    irr: Optional[float] = None
    npv: float


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr_endpoint(inputs: IRRInput):
    """Calculate IRR and NPV for an initial investment and annual cash flows."""
    if not inputs.cash_flows:
        raise HTTPException(status_code=400, detail="At least 1 cash flow required")

    try:
        npv = irr.calculate_npv(
            inputs.initial_investment, inputs.cash_flows, inputs.discount_rate
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return IRRResponse(
        irr=irr.calculate_irr(inputs.initial_investment, inputs.cash_flows),
        npv=npv,
    )


class RecommendationInput(BaseModel):
    """Metrics scored by the recommendation rubric."""

    roi: float
    cap_rate: float
    cash_flow: float
    dscr: float
    npv: float


class RecommendationResponse(BaseModel):
    """Recommendation with score and reasons."""

    recommendation: str
    score: int
    reasons: List[str]


@router.post("/recommendation", response_model=RecommendationResponse)
async def calculate_recommendation(inputs: RecommendationInput):
    """Score a set of metrics."""
    verdict = recommendation.generate_recommendation(
        roi=inputs.roi,
        cap_rate=inputs.cap_rate,
        cash_flow=inputs.cash_flow,
        dscr=inputs.dscr,
        npv=inputs.npv,
    )

    return RecommendationResponse(
        recommendation=verdict.recommendation.value,
        score=verdict.score,
        reasons=list(verdict.reasons),
    )
