"""
Calculator form validation.

Validation is a pure function of the current field values: the full set
of field errors is recomputed on every call, so there is no per-field
error state to fall out of sync with the form.
"""

from drawodds.config import (
    MAX_COPIES_PER_CARD,
    MAX_HAND_SIZE,
    MAX_TOTAL_CARDS,
    MAX_UNIQUE_CARDS_NEEDED,
    POINTS_TO_WIN,
)
from drawodds.models.calculation import CalculationInput
from drawodds.services.card_catalog import CARD_CATALOG

TOTAL_CARDS_FIELD = "total_cards"


def range_error(value: int, minimum: int, maximum: int) -> str | None:
    """Message for a value outside [minimum, maximum], else None."""
    if value < minimum or value > maximum:
        return f"Value must be between {minimum} and {maximum}"
    return None


def validate_total_cards(cards_in_deck: int, cards_in_hand: int) -> str | None:
    """Deck and hand together can never exceed a full deck."""
    if cards_in_deck + cards_in_hand > MAX_TOTAL_CARDS:
        return f"Total cards (deck + hand) cannot exceed {MAX_TOTAL_CARDS}"
    return None


def validate_calculation_input(params: CalculationInput) -> dict[str, str]:
    """
    Collect every field-level error for a calculation request.

    Keys are field names; per-card fields are indexed, e.g.
    "remaining_in_deck[1]". Total-size problems are reported under
    "total_cards".

    Args:
        params: Current form values

    Returns:
        Mapping of field name to message. Empty when the input is valid.
    """
    errors: dict[str, str] = {}

    if params.card_name not in CARD_CATALOG:
        errors["card_name"] = f"Unknown card '{params.card_name}'"

    bounded_fields = (
        ("cards_in_deck", params.cards_in_deck, 1, MAX_TOTAL_CARDS),
        ("cards_in_hand", params.cards_in_hand, 0, MAX_HAND_SIZE),
        ("unique_cards_needed", params.unique_cards_needed, 1, MAX_UNIQUE_CARDS_NEEDED),
        ("opponent_points", params.opponent_points, 0, POINTS_TO_WIN - 1),
        ("user_points", params.user_points, 0, POINTS_TO_WIN - 1),
    )
    for name, value, minimum, maximum in bounded_fields:
        message = range_error(value, minimum, maximum)
        if message:
            errors[name] = message

    for field_name, values, minimum in (
        ("remaining_in_deck", params.remaining_in_deck, 1),
        ("in_hand", params.in_hand, 0),
    ):
        if len(values) != params.unique_cards_needed:
            errors[field_name] = (
                f"Expected {params.unique_cards_needed} value(s), got {len(values)}"
            )
        for index, value in enumerate(values):
            message = range_error(value, minimum, MAX_COPIES_PER_CARD)
            if message:
                errors[f"{field_name}[{index}]"] = message

    total_error = validate_total_cards(params.cards_in_deck, params.cards_in_hand)
    if total_error:
        errors[TOTAL_CARDS_FIELD] = total_error

    return errors
