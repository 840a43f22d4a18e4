"""
Per-card odds calculators.

One calculator per CalculationPolicy. Each reads the card's parameters
from its catalog entry and turns hypergeometric odds for the tracked
cards into a play / don't-play recommendation.

Combined odds are the product of the per-card odds. Draws of different
target cards from the same deck are not truly independent, but the
product is the defined headline metric and is kept as is.
"""

from drawodds.analysis.probability import hypergeometric
from drawodds.config import POINTS_TO_WIN
from drawodds.models.calculation import (
    CalculationDetails,
    CalculationInput,
    CalculationResult,
    CardOdds,
    format_percent,
)
from drawodds.models.card import CardDefinition

ALREADY_IN_HAND = "Already in hand"
LOW_CHANCE = "Less than 50% chance"
GOOD_CHANCE = "Good chance"
WILL_DISCARD = "Will discard from hand!"

# Per-card odds at or above this count as a likely hit
GOOD_CHANCE_ODDS = 0.5


def _chance_comment(odds: float) -> str:
    return LOW_CHANCE if odds < GOOD_CHANCE_ODDS else GOOD_CHANCE


def calculate_draw_to_hand_size_odds(
    card: CardDefinition,
    params: CalculationInput,
) -> CalculationResult:
    """
    Odds for a card that reshuffles your hand and redraws the same count (Iono).

    Tracked cards already in hand count as found and stay out of the
    combined product. The card is worth playing when the combined odds
    clear the threshold, or when every tracked card is individually a
    good chance.
    """
    cards_to_draw = params.cards_in_hand

    if cards_to_draw == 0:
        return CalculationResult(
            worth_it=False,
            explanation=f"You have no cards in hand, so {card.name} would have no effect.",
            details=CalculationDetails(
                card_name=card.name,
                card_effect=card.effect_text,
                cards_to_draw=cards_to_draw,
                cards_in_deck=params.cards_in_deck,
                current_hand_size=params.cards_in_hand,
                odds=[],
            ),
        )

    combined_odds = 1.0
    all_cards_found = True
    card_odds: list[CardOdds] = []

    for index, remaining, held in params.tracked_cards():
        if held > 0:
            card_odds.append(
                CardOdds(
                    card_index=index + 1,
                    in_hand=held,
                    remaining_in_deck=remaining,
                    odds=1.0,
                    comment=ALREADY_IN_HAND,
                )
            )
            continue

        odds = hypergeometric(params.cards_in_deck, remaining, cards_to_draw, 1)
        card_odds.append(
            CardOdds(
                card_index=index + 1,
                in_hand=held,
                remaining_in_deck=remaining,
                odds=odds,
                comment=_chance_comment(odds),
            )
        )

        combined_odds *= odds
        if odds < GOOD_CHANCE_ODDS:
            all_cards_found = False

    worth_it = combined_odds > card.threshold or all_cards_found

    explanation = (
        f"Playing {card.name} will shuffle your hand of {params.cards_in_hand} cards "
        f"into your deck and draw {cards_to_draw} new cards. "
        f"Chance of getting needed card(s): {format_percent(combined_odds)}%. "
    )
    explanation += "Worth playing!" if worth_it else "Probably not worth playing."

    return CalculationResult(
        worth_it=worth_it,
        explanation=explanation,
        details=CalculationDetails(
            card_name=card.name,
            card_effect=card.effect_text,
            cards_to_draw=cards_to_draw,
            cards_in_deck=params.cards_in_deck,
            current_hand_size=params.cards_in_hand,
            combined_odds=combined_odds,
            threshold_used=card.threshold,
            odds=card_odds,
        ),
    )


def calculate_opponent_draw_by_points_odds(
    card: CardDefinition,
    params: CalculationInput,
) -> CalculationResult:
    """
    Odds for a card that makes the opponent redraw one card per point they
    still need (Mars).

    A tracked card already in the opponent's hand gets shuffled away, so
    every tracked card is redrawn through the hypergeometric odds. When
    any of them was in hand the threshold rises, since the disruption may
    hand the opponent back what they already had.
    """
    points_needed = POINTS_TO_WIN - params.opponent_points
    draw_count = points_needed

    if draw_count <= 0:
        return CalculationResult(
            worth_it=False,
            explanation=(
                f"Opponent has no points left to earn. {card.name} would have no effect."
            ),
            details=CalculationDetails(
                card_name=card.name,
                card_effect=card.effect_text,
                cards_to_draw=0,
                opponent_points=params.opponent_points,
                points_needed=0,
                recommendation="Not worth playing in this situation.",
            ),
        )

    tracked = params.tracked_cards()
    any_cards_in_hand = any(held > 0 for _, _, held in tracked)

    mars_odds = 1.0
    card_odds: list[CardOdds] = []

    for index, remaining, held in tracked:
        odds = hypergeometric(params.cards_in_deck, remaining, draw_count, 1)
        will_discard = held > 0
        card_odds.append(
            CardOdds(
                card_index=index + 1,
                in_hand=held,
                remaining_in_deck=remaining,
                odds=odds,
                comment=WILL_DISCARD if will_discard else _chance_comment(odds),
                will_discard=will_discard,
            )
        )
        mars_odds *= odds

    threshold = card.threshold
    if any_cards_in_hand and card.threshold_with_cards_in_hand is not None:
        threshold = card.threshold_with_cards_in_hand
    worth_it = mars_odds > threshold

    explanation = (
        f"Playing {card.name} will make your opponent shuffle their hand and draw "
        f"{draw_count} new cards based on their remaining points needed to win "
        f"({points_needed}). "
    )
    if any_cards_in_hand:
        explanation += "Warning: Your opponent will be drawing cards which might help them. "
    explanation += f"Chance of them getting needed cards: {format_percent(mars_odds)}%. "
    explanation += "Worth playing as a disruption!" if worth_it else "Probably not worth playing."

    return CalculationResult(
        worth_it=worth_it,
        explanation=explanation,
        details=CalculationDetails(
            card_name=card.name,
            card_effect=card.effect_text,
            cards_to_draw=draw_count,
            cards_in_deck=params.cards_in_deck,
            opponent_points=params.opponent_points,
            points_needed=points_needed,
            has_cards_in_hand=any_cards_in_hand,
            combined_odds=mars_odds,
            threshold_used=threshold,
            odds=card_odds,
        ),
    )


def calculate_always_worthwhile_result(
    card: CardDefinition,
    params: CalculationInput,  # noqa: ARG001  Shared calculator signature
) -> CalculationResult:
    """Recommendation for a pure disruption card (Red Card). No odds involved."""
    draw_count = card.draw_count or 0
    return CalculationResult(
        worth_it=True,
        explanation=(
            f"{card.name} disrupts your opponent's hand by making them shuffle their hand "
            f"into their deck and draw {draw_count} new cards, generally worth playing "
            "if it fits your strategy."
        ),
        details=CalculationDetails(
            card_name=card.name,
            card_effect=card.effect_text,
            cards_to_draw=draw_count,
            strategic_value="High",
            disruption_potential=(
                f"Forces opponent to shuffle their hand and draw {draw_count} new cards"
            ),
            recommendation=(
                "Consider the game state - best played when opponent has a large "
                "or valuable hand"
            ),
        ),
    )
