from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from functools import lru_cache

from app.core.config import settings
from app.core.db import SessionLocal
from app.db.repositories.block_repository import DatabaseBlockSource
from app.domains.cards.schemas import CardTreeResponse
from app.domains.cards.services import CardTreeService

router = APIRouter(prefix="/cards", tags=["cards"])


@lru_cache(maxsize=1)
def get_card_tree_service() -> CardTreeService:
    """Единый сервис деревьев карточек на процесс"""
    source = DatabaseBlockSource(SessionLocal, levels=settings.subtree_levels)
    return CardTreeService(source, serialize_syncs=settings.serialize_syncs)


@router.get("/{card_id}", response_model=CardTreeResponse)
async def get_card_tree(
    card_id: str,
    card_tree_service: CardTreeService = Depends(get_card_tree_service)
):
    """Синхронизация и получение дерева карточки"""
    try:
        snapshot = await card_tree_service.sync_card(card_id)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Block storage unavailable"
        )

    if snapshot.root is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Card not found"
        )

    return CardTreeResponse.from_snapshot(snapshot)
