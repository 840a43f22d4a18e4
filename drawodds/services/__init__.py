"""
DrawOdds services.

Card catalog and calculator form validation.
"""

from drawodds.services.card_catalog import CARD_CATALOG, list_card_names, lookup
from drawodds.services.input_validation import (
    TOTAL_CARDS_FIELD,
    validate_calculation_input,
    validate_total_cards,
)

__all__ = [
    "CARD_CATALOG",
    "TOTAL_CARDS_FIELD",
    "list_card_names",
    "lookup",
    "validate_calculation_input",
    "validate_total_cards",
]
