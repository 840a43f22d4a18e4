"""Tests for the calculate API endpoint."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from drawodds.main import app


@pytest.fixture
async def client():
    """Provide an async test client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestCalculateOdds:
    async def test_iono_full_hand(self, client: AsyncClient) -> None:
        """Worth playing when 7 fresh cards give better than even odds."""
        response = await client.post(
            "/calculate",
            json={
                "card_name": "Iono",
                "cards_in_deck": 13,
                "cards_in_hand": 7,
                "unique_cards_needed": 1,
                "remaining_in_deck": [1],
                "in_hand": [0],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "success"
        assert body["failure"] is None
        data = body["data"]
        assert data["worth_it"] is True
        assert data["details"]["cards_to_draw"] == 7
        assert data["details"]["combined_odds_percent"] == "53.85"
        assert data["details"]["odds"][0]["odds_percent"] == "53.85"
        assert data["details"]["odds"][0]["comment"] == "Good chance"

    async def test_mars_discard_annotation(self, client: AsyncClient) -> None:
        """Rows for cards in hand carry the discard flag."""
        response = await client.post(
            "/calculate",
            json={
                "card_name": "Mars",
                "cards_in_deck": 6,
                "cards_in_hand": 4,
                "unique_cards_needed": 1,
                "remaining_in_deck": [2],
                "in_hand": [1],
                "opponent_points": 0,
            },
        )

        assert response.status_code == 200
        details = response.json()["data"]["details"]
        assert details["odds"][0]["will_discard"] is True
        assert details["has_cards_in_hand"] is True
        assert details["threshold_used"] == 0.7

    async def test_red_card(self, client: AsyncClient) -> None:
        response = await client.post(
            "/calculate",
            json={"card_name": "Red Card", "cards_in_deck": 10, "cards_in_hand": 3},
        )

        data = response.json()["data"]
        assert data["worth_it"] is True
        assert data["details"]["cards_to_draw"] == 3
        assert data["details"]["combined_odds"] is None

    async def test_empty_hand_iono(self, client: AsyncClient) -> None:
        response = await client.post(
            "/calculate",
            json={"card_name": "Iono", "cards_in_deck": 15, "cards_in_hand": 0},
        )

        data = response.json()["data"]
        assert data["worth_it"] is False
        assert data["details"]["odds"] == []


class TestCalculateValidation:
    async def test_total_cards_rejected(self, client: AsyncClient) -> None:
        """Deck plus hand over 20 never reaches the calculator."""
        response = await client.post(
            "/calculate",
            json={"card_name": "Iono", "cards_in_deck": 15, "cards_in_hand": 8},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["data"] is None
        assert body["failure"]["kind"] == "validation_failed"
        assert "total_cards" in body["failure"]["field_errors"]

    async def test_all_field_errors_reported(self, client: AsyncClient) -> None:
        response = await client.post(
            "/calculate",
            json={
                "card_name": "Iono",
                "cards_in_deck": 0,
                "cards_in_hand": 5,
                "unique_cards_needed": 2,
                "remaining_in_deck": [1, 3],
                "in_hand": [0, 0],
            },
        )

        field_errors = response.json()["failure"]["field_errors"]
        assert field_errors["cards_in_deck"] == "Value must be between 1 and 20"
        assert field_errors["remaining_in_deck[1]"] == "Value must be between 1 and 2"

    async def test_non_numeric_field(self, client: AsyncClient) -> None:
        """Type errors use the same envelope as range errors."""
        response = await client.post(
            "/calculate",
            json={"card_name": "Iono", "cards_in_deck": "lots", "cards_in_hand": 5},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["failure"]["kind"] == "validation_failed"
        assert "cards_in_deck" in body["failure"]["field_errors"]

    async def test_non_numeric_list_entry(self, client: AsyncClient) -> None:
        response = await client.post(
            "/calculate",
            json={
                "card_name": "Iono",
                "cards_in_deck": 13,
                "cards_in_hand": 7,
                "remaining_in_deck": ["one"],
            },
        )

        assert response.status_code == 422
        assert "remaining_in_deck[0]" in response.json()["failure"]["field_errors"]

    async def test_unknown_card_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/calculate",
            json={"card_name": "Sabrina", "cards_in_deck": 13, "cards_in_hand": 7},
        )

        assert response.status_code == 422
        assert "card_name" in response.json()["failure"]["field_errors"]


class TestUnexpectedErrors:
    def test_unexpected_error_returns_classified_500(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)

        with patch("drawodds.api.calculate.calculate", side_effect=RuntimeError("boom")):
            response = client.post(
                "/calculate",
                json={"card_name": "Iono", "cards_in_deck": 13, "cards_in_hand": 7},
            )

        assert response.status_code == 500
        body = response.json()
        assert body["outcome"] == "unknown_failure"
        assert body["failure"]["kind"] == "unknown"
        assert body["failure"]["detail"] == "RuntimeError"
