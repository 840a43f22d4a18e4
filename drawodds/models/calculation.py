"""
Calculation models.

A CalculationInput is built fresh for every "Calculate" action and
discarded once its CalculationResult has been rendered. Nothing here
is persisted.
"""

from dataclasses import dataclass, field

from drawodds.config import DEFAULT_POINTS


@dataclass(frozen=True, slots=True)
class CalculationInput:
    """
    Numeric inputs for one odds calculation.

    Attributes:
        card_name: Card being considered
        cards_in_deck: Cards left in the deck being drawn from
        cards_in_hand: Cards currently in hand
        unique_cards_needed: How many distinct target cards are tracked (1-3)
        remaining_in_deck: Copies still in the deck, per tracked card
        in_hand: Copies already held, per tracked card
        opponent_points: Points the opponent has already earned (0-2)
        user_points: Points the user has already earned (0-2)
    """

    card_name: str
    cards_in_deck: int
    cards_in_hand: int
    unique_cards_needed: int = 1
    remaining_in_deck: tuple[int, ...] = (1,)
    in_hand: tuple[int, ...] = (0,)
    opponent_points: int = DEFAULT_POINTS
    user_points: int = DEFAULT_POINTS

    def tracked_cards(self) -> list[tuple[int, int, int]]:
        """(index, remaining_in_deck, in_hand) for each tracked card."""
        return [
            (index, self.remaining_in_deck[index], self.in_hand[index])
            for index in range(
                min(self.unique_cards_needed, len(self.remaining_in_deck), len(self.in_hand))
            )
        ]


@dataclass(frozen=True, slots=True)
class CardOdds:
    """Odds of finding one tracked card."""

    card_index: int  # 1-based, as shown in the form
    in_hand: int
    remaining_in_deck: int
    odds: float  # Probability 0.0-1.0
    comment: str
    will_discard: bool = False

    @property
    def odds_percent(self) -> str:
        return format_percent(self.odds)


@dataclass
class CalculationDetails:
    """
    Breakdown shown under the recommendation.

    Only the fields relevant to the card's policy are filled in.
    """

    card_name: str
    card_effect: str
    cards_to_draw: int
    odds: list[CardOdds] = field(default_factory=list)
    cards_in_deck: int | None = None
    current_hand_size: int | None = None
    combined_odds: float | None = None
    opponent_points: int | None = None
    points_needed: int | None = None
    has_cards_in_hand: bool | None = None
    threshold_used: float | None = None
    strategic_value: str | None = None
    disruption_potential: str | None = None
    recommendation: str | None = None


@dataclass
class CalculationResult:
    """Recommendation with its justification."""

    worth_it: bool
    explanation: str
    details: CalculationDetails | None = None


def format_percent(probability: float) -> str:
    """Render a probability as a two-decimal percentage, e.g. 0.35 -> '35.00'."""
    return f"{probability * 100:.2f}"
