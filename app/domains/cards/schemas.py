from pydantic import BaseModel, Field, ConfigDict
from typing import List, Dict, Any

from app.domains.blocks.schemas import BlockResponse
from app.domains.cards.entities import Card, CardTreeSnapshot


class CardResponse(BaseModel):
    """Схема для ответа с данными карточки"""
    id: str
    title: str
    icon: str
    properties: Dict[str, Any]
    is_template: bool = Field(..., alias="isTemplate")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            title=card.title,
            icon=card.icon,
            properties=card.properties,
            is_template=card.is_template
        )


class CardTreeResponse(BaseModel):
    """Схема для ответа с деревом карточки"""
    card: CardResponse
    comments: List[BlockResponse]
    contents: List[BlockResponse]
    is_ready: bool = Field(..., alias="isReady")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_snapshot(cls, snapshot: CardTreeSnapshot) -> "CardTreeResponse":
        if snapshot.card is None:
            raise ValueError("Snapshot has no card")
        return cls(
            card=CardResponse.from_entity(snapshot.card),
            comments=[BlockResponse.from_entity(block) for block in snapshot.comments],
            contents=[BlockResponse.from_entity(block) for block in snapshot.contents],
            is_ready=snapshot.is_ready
        )
