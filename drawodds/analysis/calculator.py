"""
Odds calculation entry point.

Routes a calculation request to the calculator for the selected card's
policy. Pure: no I/O, no shared mutable state, same input gives the
same result.
"""

import logging
from collections.abc import Callable

from drawodds.analysis.odds import (
    calculate_always_worthwhile_result,
    calculate_draw_to_hand_size_odds,
    calculate_opponent_draw_by_points_odds,
)
from drawodds.models.calculation import CalculationInput, CalculationResult
from drawodds.models.card import CalculationPolicy, CardDefinition
from drawodds.models.failure import CardNotFoundError
from drawodds.services.card_catalog import lookup

logger = logging.getLogger(__name__)

PolicyCalculator = Callable[[CardDefinition, CalculationInput], CalculationResult]

POLICY_CALCULATORS: dict[CalculationPolicy, PolicyCalculator] = {
    CalculationPolicy.DRAW_TO_HAND_SIZE: calculate_draw_to_hand_size_odds,
    CalculationPolicy.OPPONENT_DRAW_BY_POINTS: calculate_opponent_draw_by_points_odds,
    CalculationPolicy.ALWAYS_WORTHWHILE: calculate_always_worthwhile_result,
}

INVALID_CONFIGURATION = "Invalid deck/hand configuration."
NO_CARD_SELECTED = "Select a card to calculate odds."


def calculate(params: CalculationInput) -> CalculationResult:
    """
    Calculate whether playing the selected card is worth it.

    Never raises for inputs in the calculator's domain. Degenerate
    configurations and unknown cards come back as a not-worth-it result
    with an explanation.

    Args:
        params: Inputs collected by the front end

    Returns:
        CalculationResult with recommendation, explanation and breakdown
    """
    if params.cards_in_hand + params.cards_in_deck <= 0:
        return CalculationResult(worth_it=False, explanation=INVALID_CONFIGURATION)

    try:
        card = lookup(params.card_name)
    except CardNotFoundError:
        logger.info("No calculator for card %r", params.card_name)
        return CalculationResult(worth_it=False, explanation=NO_CARD_SELECTED)

    logger.debug(
        "Calculating %s odds (policy=%s, deck=%d, hand=%d)",
        card.name,
        card.policy.value,
        params.cards_in_deck,
        params.cards_in_hand,
    )
    return POLICY_CALCULATORS[card.policy](card, params)
