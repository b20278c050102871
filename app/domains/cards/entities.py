import asyncio
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, Sequence, Protocol

from app.domains.blocks.entities import Block, BlockKind, classify_block


class BlockSource(Protocol):
    """Внешний источник блоков: все блоки поддерева карточки за один вызов"""

    async def get_subtree(self, root_id: str) -> Sequence[Block]:
        ...


@dataclass(frozen=True)
class Card:
    """Карточка: типизированное представление корневого блока"""
    id: str
    title: str = ""
    icon: str = ""
    properties: Dict[str, Any] = field(default_factory=dict)
    is_template: bool = False

    @classmethod
    def from_block(cls, block: Block) -> "Card":
        fields = block.fields if isinstance(block.fields, dict) else {}
        icon = fields.get("icon")
        properties = fields.get("properties")
        # Поля карточки произвольные: значения не того типа заменяются умолчаниями
        return cls(
            id=block.id,
            title=block.title or "",
            icon=icon if isinstance(icon, str) else "",
            properties=dict(properties) if isinstance(properties, dict) else {},
            is_template=bool(fields.get("isTemplate", False))
        )


@dataclass(frozen=True)
class CardTreeSnapshot:
    """Неизменяемый срез дерева карточки после одной синхронизации"""
    root: Optional[Block] = None
    comments: Tuple[Block, ...] = ()
    contents: Tuple[Block, ...] = ()
    is_ready: bool = False

    @property
    def card(self) -> Optional[Card]:
        return Card.from_block(self.root) if self.root is not None else None


def _missing_last(value) -> tuple:
    # Блоки без ключа сортировки (None или NaN) идут после всех остальных
    missing = value is None or (isinstance(value, float) and math.isnan(value))
    return (missing, 0 if missing else value)


def build_snapshot(card_id: str, blocks: Sequence[Block]) -> CardTreeSnapshot:
    """Построение среза из плоского списка блоков"""
    blocks = list(blocks)
    root = next((block for block in blocks if block.id == card_id), None)

    comments = []
    contents = []
    for block in blocks:
        kind = classify_block(block)
        if kind is BlockKind.COMMENT:
            comments.append(block)
        elif kind is BlockKind.CONTENT:
            contents.append(block)

    # sorted() устойчива: равные ключи сохраняют порядок выборки
    return CardTreeSnapshot(
        root=root,
        comments=tuple(sorted(comments, key=lambda b: _missing_last(b.create_at))),
        contents=tuple(sorted(contents, key=lambda b: _missing_last(b.order))),
        is_ready=True
    )


class CardTree:
    """Дерево карточки: корневой блок, содержимое и комментарии"""

    def __init__(self, card_id: str, source: BlockSource, serialize_syncs: bool = True):
        if not card_id:
            raise ValueError("Card id cannot be empty")
        self._card_id = card_id
        self._source = source
        self._lock = asyncio.Lock() if serialize_syncs else None
        self._snapshot = CardTreeSnapshot()

    @property
    def card_id(self) -> str:
        return self._card_id

    @property
    def snapshot(self) -> CardTreeSnapshot:
        return self._snapshot

    @property
    def root(self) -> Optional[Block]:
        return self._snapshot.root

    @property
    def card(self) -> Optional[Card]:
        return self._snapshot.card

    @property
    def comments(self) -> Tuple[Block, ...]:
        return self._snapshot.comments

    @property
    def contents(self) -> Tuple[Block, ...]:
        return self._snapshot.contents

    @property
    def is_ready(self) -> bool:
        return self._snapshot.is_ready

    @property
    def serializes_syncs(self) -> bool:
        return self._lock is not None

    async def sync(self) -> CardTreeSnapshot:
        """Полная перезагрузка поддерева и пересборка среза.

        Ошибки источника пробрасываются без изменений, прежний срез
        при этом остается на месте.
        """
        if self._lock is None:
            return await self._fetch_and_rebuild()

        async with self._lock:
            return await self._fetch_and_rebuild()

    async def _fetch_and_rebuild(self) -> CardTreeSnapshot:
        blocks = await self._source.get_subtree(self._card_id)
        return self.rebuild(blocks)

    def rebuild(self, blocks: Sequence[Block]) -> CardTreeSnapshot:
        """Пересборка среза из блоков одной выборки"""
        snapshot = build_snapshot(self._card_id, blocks)
        self._snapshot = snapshot
        return snapshot

    def __repr__(self) -> str:
        return (
            f"CardTree(card={self._card_id}, ready={self.is_ready}, "
            f"comments={len(self.comments)}, contents={len(self.contents)})"
        )
