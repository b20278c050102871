from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import time

from app.db.repositories.block_repository import BlockRepository
from app.domains.blocks.entities import Block
from app.domains.blocks.schemas import BlockCreate


def now_millis() -> int:
    """Текущее время в миллисекундах от эпохи"""
    return int(time.time() * 1000)


class BlockService:
    """Сервис для работы с блоками"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.block_repository = BlockRepository(session)

    async def create_blocks(self, blocks_data: List[BlockCreate]) -> List[Block]:
        """Вставка или замена блоков; время создания проставляется, если не задано"""
        if not blocks_data:
            return []

        timestamp = now_millis()
        blocks = []
        for data in blocks_data:
            block = Block(
                id=data.id,
                type=data.type,
                parent_id=data.parent_id,
                root_id=data.root_id,
                created_by=data.created_by,
                title=data.title,
                fields=data.fields,
                order=data.order,
                create_at=data.create_at if data.create_at is not None else timestamp,
                update_at=data.update_at if data.update_at is not None else timestamp
            )
            blocks.append(block)

        return await self.block_repository.upsert_many(blocks)

    async def get_block(self, block_id: str) -> Optional[Block]:
        """Получение блока по id"""
        return await self.block_repository.get_by_id(block_id)

    async def get_subtree(self, root_id: str, levels: int = 2) -> List[Block]:
        """Получение поддерева блоков"""
        return await self.block_repository.get_subtree(root_id, levels)

    async def delete_block(self, block_id: str) -> bool:
        """Удаление блока (мягкое)"""
        return await self.block_repository.soft_delete(block_id, now_millis())
