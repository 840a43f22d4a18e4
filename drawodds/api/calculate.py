"""
Calculate API endpoint.

Takes the calculator form, validates it and returns the play
recommendation with a per-card odds breakdown.
"""

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from drawodds.analysis.calculator import calculate
from drawodds.config import DEFAULT_POINTS
from drawodds.models.calculation import (
    CalculationDetails,
    CalculationInput,
    CalculationResult,
    format_percent,
)
from drawodds.models.failure import ApiResponse, InputValidationError, create_success
from drawodds.services.input_validation import validate_calculation_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


class CalculationRequest(BaseModel):
    """Calculator form values."""

    card_name: str
    cards_in_deck: int
    cards_in_hand: int
    unique_cards_needed: int = 1
    remaining_in_deck: list[int] = Field(default_factory=lambda: [1])
    in_hand: list[int] = Field(default_factory=lambda: [0])
    opponent_points: int = DEFAULT_POINTS
    user_points: int = DEFAULT_POINTS

    def to_input(self) -> CalculationInput:
        return CalculationInput(
            card_name=self.card_name,
            cards_in_deck=self.cards_in_deck,
            cards_in_hand=self.cards_in_hand,
            unique_cards_needed=self.unique_cards_needed,
            remaining_in_deck=tuple(self.remaining_in_deck),
            in_hand=tuple(self.in_hand),
            opponent_points=self.opponent_points,
            user_points=self.user_points,
        )


class CardOddsResponse(BaseModel):
    """Odds row for one tracked card."""

    card_index: int
    in_hand: int
    remaining_in_deck: int
    odds: float = Field(ge=0.0, le=1.0)
    odds_percent: str
    comment: str
    will_discard: bool = False


class CalculationDetailsResponse(BaseModel):
    """Breakdown of a calculation. Policy-specific fields may be null."""

    card_name: str
    card_effect: str
    cards_to_draw: int
    odds: list[CardOddsResponse] = Field(default_factory=list)
    cards_in_deck: int | None = None
    current_hand_size: int | None = None
    combined_odds: float | None = None
    combined_odds_percent: str | None = None
    opponent_points: int | None = None
    points_needed: int | None = None
    has_cards_in_hand: bool | None = None
    threshold_used: float | None = None
    strategic_value: str | None = None
    disruption_potential: str | None = None
    recommendation: str | None = None


class CalculationResponse(BaseModel):
    """Play recommendation."""

    worth_it: bool
    explanation: str
    details: CalculationDetailsResponse | None = None


def _details_to_response(details: CalculationDetails) -> CalculationDetailsResponse:
    return CalculationDetailsResponse(
        card_name=details.card_name,
        card_effect=details.card_effect,
        cards_to_draw=details.cards_to_draw,
        odds=[
            CardOddsResponse(
                card_index=row.card_index,
                in_hand=row.in_hand,
                remaining_in_deck=row.remaining_in_deck,
                odds=row.odds,
                odds_percent=row.odds_percent,
                comment=row.comment,
                will_discard=row.will_discard,
            )
            for row in details.odds
        ],
        cards_in_deck=details.cards_in_deck,
        current_hand_size=details.current_hand_size,
        combined_odds=details.combined_odds,
        combined_odds_percent=(
            format_percent(details.combined_odds) if details.combined_odds is not None else None
        ),
        opponent_points=details.opponent_points,
        points_needed=details.points_needed,
        has_cards_in_hand=details.has_cards_in_hand,
        threshold_used=details.threshold_used,
        strategic_value=details.strategic_value,
        disruption_potential=details.disruption_potential,
        recommendation=details.recommendation,
    )


def result_to_response(result: CalculationResult) -> CalculationResponse:
    return CalculationResponse(
        worth_it=result.worth_it,
        explanation=result.explanation,
        details=_details_to_response(result.details) if result.details else None,
    )


@router.post("", response_model=ApiResponse[CalculationResponse])
async def calculate_odds(request: CalculationRequest) -> ApiResponse[Any]:
    """
    Calculate whether playing the selected card is worth it.

    Returns a validation_failed known failure (422) listing every bad
    field when the form does not validate. The calculation itself never
    fails for validated input.
    """
    params = request.to_input()

    errors = validate_calculation_input(params)
    if errors:
        logger.info("Rejected calculation for %r: %s", params.card_name, sorted(errors))
        raise InputValidationError(errors)

    return create_success(result_to_response(calculate(params)))
