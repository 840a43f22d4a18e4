"""
Cards API endpoint.

Lists the supported hand-disruption cards for the card selector.
"""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from drawodds.models.card import CardDefinition
from drawodds.models.failure import ApiResponse, create_success
from drawodds.services.card_catalog import CARD_CATALOG, lookup

router = APIRouter(prefix="/cards", tags=["cards"])


class CardResponse(BaseModel):
    """A supported card and how its odds are calculated."""

    name: str
    effect_text: str
    policy: str
    affects: str
    uses_points: bool
    draw_count: int | None = None


class CardListResponse(BaseModel):
    """Supported cards in selector order."""

    cards: list[CardResponse] = Field(default_factory=list)
    total: int


def card_to_response(card: CardDefinition) -> CardResponse:
    return CardResponse(
        name=card.name,
        effect_text=card.effect_text,
        policy=card.policy.value,
        affects=card.affects.value,
        uses_points=card.uses_points,
        draw_count=card.draw_count,
    )


@router.get("", response_model=ApiResponse[CardListResponse])
async def list_cards() -> ApiResponse[Any]:
    """List every supported card in registration order."""
    cards = [card_to_response(card) for card in CARD_CATALOG.values()]
    return create_success(CardListResponse(cards=cards, total=len(cards)))


@router.get("/{card_name}", response_model=ApiResponse[CardResponse])
async def get_card(card_name: str) -> ApiResponse[Any]:
    """
    Get a single card.

    Unknown names raise CardNotFoundError, returned as a 404 known failure.
    """
    return create_success(card_to_response(lookup(card_name)))
