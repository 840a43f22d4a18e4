from dataclasses import dataclass
from enum import Enum


class CalculationPolicy(str, Enum):
    """Rule deciding how a card's odds are computed."""

    DRAW_TO_HAND_SIZE = "draw_to_hand_size"  # Shuffle hand, draw that many back
    OPPONENT_DRAW_BY_POINTS = "opponent_draw_by_points"  # Opponent draws per point left
    ALWAYS_WORTHWHILE = "always_worthwhile"  # Pure disruption, no odds needed


class Affects(str, Enum):
    """Whose deck, hand and points a card's policy reads."""

    USER = "user"
    OPPONENT = "opponent"


@dataclass(frozen=True, slots=True)
class CardDefinition:
    """
    A supported hand-disruption card.

    Attributes:
        name: Card name exactly as printed
        effect_text: Rules text, for display only
        policy: Which odds calculator applies
        affects: Whose resources the policy reads
        uses_points: Whether the policy needs a points-remaining input
        threshold: Odds above which the card is worth playing
        threshold_with_cards_in_hand: Stricter threshold used when a needed
            card is already in hand and would be shuffled away
        draw_count: Fixed number of cards drawn, for cards that set one
    """

    name: str
    effect_text: str
    policy: CalculationPolicy
    affects: Affects = Affects.USER
    uses_points: bool = False
    threshold: float = 0.5
    threshold_with_cards_in_hand: float | None = None
    draw_count: int | None = None
