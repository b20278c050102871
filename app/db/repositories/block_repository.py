from typing import Optional, List, Sequence, Callable, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, or_

from app.db.models.block import Block as BlockModel

if TYPE_CHECKING:
    from app.domains.blocks.entities import Block


SUBTREE_LEVELS = (2, 3)


class BlockRepository:
    """Репозиторий для работы с блоками"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert_many(self, blocks: Sequence["Block"]) -> List["Block"]:
        """Вставка или замена блоков по id"""
        merged = []
        for block in blocks:
            db_block = await self.session.merge(
                BlockModel(
                    id=block.id,
                    parent_id=block.parent_id,
                    root_id=block.root_id,
                    created_by=block.created_by,
                    type=block.type,
                    title=block.title,
                    fields=block.fields,
                    order=block.order,
                    create_at=block.create_at,
                    update_at=block.update_at,
                    delete_at=block.delete_at
                )
            )
            merged.append(db_block)

        await self.session.commit()
        return [self._to_domain(db_block) for db_block in merged]

    async def get_by_id(self, block_id: str) -> Optional["Block"]:
        """Получение неудаленного блока по id"""
        result = await self.session.execute(
            select(BlockModel).where(
                BlockModel.id == block_id,
                BlockModel.delete_at == 0
            )
        )
        db_block = result.scalar_one_or_none()
        return self._to_domain(db_block) if db_block else None

    async def get_subtree(self, root_id: str, levels: int = 2) -> List["Block"]:
        """Получение корневого блока и его потомков на levels - 1 уровней вниз"""
        if levels not in SUBTREE_LEVELS:
            raise ValueError(f"Unsupported subtree depth: {levels}")

        conditions = [BlockModel.id == root_id, BlockModel.parent_id == root_id]

        if levels == 3:
            children = (
                select(BlockModel.id)
                .where(BlockModel.parent_id == root_id, BlockModel.delete_at == 0)
            )
            conditions.append(BlockModel.parent_id.in_(children))

        result = await self.session.execute(
            select(BlockModel).where(or_(*conditions), BlockModel.delete_at == 0)
        )
        db_blocks = result.scalars().all()
        return [self._to_domain(db_block) for db_block in db_blocks]

    async def soft_delete(self, block_id: str, deleted_at: int) -> bool:
        """Пометка блока удаленным"""
        stmt = (
            update(BlockModel)
            .where(BlockModel.id == block_id, BlockModel.delete_at == 0)
            .values(delete_at=deleted_at, update_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_block: BlockModel) -> "Block":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.blocks.entities import Block

        return Block(
            id=db_block.id,
            type=db_block.type,
            parent_id=db_block.parent_id,
            root_id=db_block.root_id,
            created_by=db_block.created_by,
            title=db_block.title or "",
            fields=dict(db_block.fields or {}),
            order=db_block.order,
            create_at=db_block.create_at,
            update_at=db_block.update_at,
            delete_at=db_block.delete_at or 0
        )


class DatabaseBlockSource:
    """Источник блоков для дерева карточки: отдельная сессия на каждый запрос"""

    def __init__(self, session_factory: Callable[[], AsyncSession], levels: int = 2):
        if levels not in SUBTREE_LEVELS:
            raise ValueError(f"Unsupported subtree depth: {levels}")
        self.session_factory = session_factory
        self.levels = levels

    async def get_subtree(self, root_id: str) -> List["Block"]:
        async with self.session_factory() as session:
            return await BlockRepository(session).get_subtree(root_id, self.levels)
