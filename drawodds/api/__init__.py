from drawodds.api.calculate import router as calculate_router
from drawodds.api.cards import router as cards_router
from drawodds.api.health import router as health_router

__all__ = [
    "calculate_router",
    "cards_router",
    "health_router",
]
