import pytest

from drawodds.models.calculation import CalculationInput, CardOdds, format_percent
from drawodds.models.card import Affects, CalculationPolicy, CardDefinition


class TestCardDefinition:
    def test_defaults(self) -> None:
        card = CardDefinition(
            name="Test", effect_text="Draw", policy=CalculationPolicy.DRAW_TO_HAND_SIZE
        )
        assert card.affects == Affects.USER
        assert card.threshold == 0.5
        assert card.draw_count is None

    def test_immutable(self) -> None:
        card = CardDefinition(
            name="Test", effect_text="Draw", policy=CalculationPolicy.DRAW_TO_HAND_SIZE
        )
        with pytest.raises(AttributeError):
            card.name = "Other"  # type: ignore[misc]


class TestCalculationInput:
    def test_defaults(self) -> None:
        params = CalculationInput(card_name="Iono", cards_in_deck=15, cards_in_hand=5)
        assert params.remaining_in_deck == (1,)
        assert params.in_hand == (0,)
        assert params.opponent_points == 1
        assert params.user_points == 1

    def test_tracked_cards(self) -> None:
        params = CalculationInput(
            card_name="Iono",
            cards_in_deck=15,
            cards_in_hand=5,
            unique_cards_needed=2,
            remaining_in_deck=(1, 2),
            in_hand=(0, 1),
        )
        assert params.tracked_cards() == [(0, 1, 0), (1, 2, 1)]

    def test_tracked_cards_stops_at_shortest_list(self) -> None:
        params = CalculationInput(
            card_name="Iono",
            cards_in_deck=15,
            cards_in_hand=5,
            unique_cards_needed=3,
            remaining_in_deck=(1, 2),
            in_hand=(0,),
        )
        assert params.tracked_cards() == [(0, 1, 0)]


class TestFormatPercent:
    def test_two_decimals(self) -> None:
        assert format_percent(0.35) == "35.00"
        assert format_percent(7 / 13) == "53.85"
        assert format_percent(1.0) == "100.00"

    def test_card_odds_percent(self) -> None:
        row = CardOdds(card_index=1, in_hand=0, remaining_in_deck=1, odds=0.25, comment="x")
        assert row.odds_percent == "25.00"
