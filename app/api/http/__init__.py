from app.api.http.health import router as health_router
from app.api.http.blocks import router as blocks_router
from app.api.http.cards import router as cards_router

__all__ = [
    "health_router",
    "blocks_router",
    "cards_router"
]
