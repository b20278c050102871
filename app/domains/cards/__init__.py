from app.domains.cards.entities import (
    BlockSource, Card, CardTree, CardTreeSnapshot, build_snapshot
)
from app.domains.cards.schemas import CardResponse, CardTreeResponse
from app.domains.cards.services import CardTreeService

__all__ = [
    "BlockSource", "Card", "CardTree", "CardTreeSnapshot", "build_snapshot",
    "CardResponse", "CardTreeResponse",
    "CardTreeService"
]
