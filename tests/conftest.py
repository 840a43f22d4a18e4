import pytest

from drawodds.models.calculation import CalculationInput


@pytest.fixture
def full_hand_iono() -> CalculationInput:
    """Iono with a 7-card hand and one needed single-copy card."""
    return CalculationInput(
        card_name="Iono",
        cards_in_deck=13,
        cards_in_hand=7,
        unique_cards_needed=1,
        remaining_in_deck=(1,),
        in_hand=(0,),
    )
