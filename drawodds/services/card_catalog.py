"""
Card catalog service.

Static registry of the supported hand-disruption cards. The catalog is
built once at import time and is read-only afterwards.
"""

from types import MappingProxyType

from drawodds.models.card import Affects, CalculationPolicy, CardDefinition
from drawodds.models.failure import CardNotFoundError

_CARDS = (
    CardDefinition(
        name="Iono",
        effect_text=(
            "Trainer - Supporter: Each player shuffles the cards in their hand into "
            "their deck, then draws that many cards."
        ),
        policy=CalculationPolicy.DRAW_TO_HAND_SIZE,
        # Hits both players; odds are computed for the user's own redraw
        affects=Affects.USER,
        uses_points=False,
        threshold=0.5,
    ),
    CardDefinition(
        name="Mars",
        effect_text=(
            "Trainer - Supporter: Your opponent shuffles their hand into their deck "
            "and draws a card for each of their remaining points needed to win."
        ),
        policy=CalculationPolicy.OPPONENT_DRAW_BY_POINTS,
        affects=Affects.OPPONENT,
        uses_points=True,
        threshold=0.5,
        threshold_with_cards_in_hand=0.7,
    ),
    CardDefinition(
        name="Red Card",
        effect_text=(
            "Trainer - Item: Your opponent shuffles their hand into their deck "
            "and draws 3 cards."
        ),
        policy=CalculationPolicy.ALWAYS_WORTHWHILE,
        affects=Affects.OPPONENT,
        uses_points=False,
        draw_count=3,
    ),
)

CARD_CATALOG: MappingProxyType[str, CardDefinition] = MappingProxyType(
    {card.name: card for card in _CARDS}
)


def list_card_names() -> list[str]:
    """Card names in registration order."""
    return list(CARD_CATALOG)


def lookup(name: str) -> CardDefinition:
    """
    Get a card definition by name.

    Raises:
        CardNotFoundError: If the name is not in the catalog
    """
    try:
        return CARD_CATALOG[name]
    except KeyError:
        raise CardNotFoundError(name) from None
