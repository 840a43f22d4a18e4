from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DRAWODDS_")

    app_name: str = "DrawOdds"
    debug: bool = False

    cors_allow_origins: list[str] = ["*"]


settings = Settings()


# =============================================================================
# GAME LIMITS
# =============================================================================

# Pocket decks hold 20 cards; deck + hand can never exceed that
MAX_TOTAL_CARDS = 20

MAX_HAND_SIZE = 8

MAX_UNIQUE_CARDS_NEEDED = 3

# A deck may run at most 2 copies of any card
MAX_COPIES_PER_CARD = 2

# Points needed to win a game
POINTS_TO_WIN = 3

# Points assumed for a player when the caller does not supply them
DEFAULT_POINTS = 1
