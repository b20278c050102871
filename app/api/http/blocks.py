from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.db import get_db
from app.domains.blocks.schemas import BlockCreate, BlockResponse, BlockSubtreeResponse
from app.domains.blocks.services import BlockService

router = APIRouter(prefix="/blocks", tags=["blocks"])


@router.post("/", response_model=List[BlockResponse], status_code=status.HTTP_201_CREATED)
async def create_blocks(
    blocks_data: List[BlockCreate],
    db: AsyncSession = Depends(get_db)
):
    """Вставка или замена блоков"""
    block_service = BlockService(db)
    blocks = await block_service.create_blocks(blocks_data)
    return [BlockResponse.from_entity(block) for block in blocks]


@router.get("/{block_id}", response_model=BlockResponse)
async def get_block(
    block_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение блока по id"""
    block_service = BlockService(db)

    block = await block_service.get_block(block_id)

    if not block:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Block not found"
        )

    return BlockResponse.from_entity(block)


@router.get("/{block_id}/subtree", response_model=BlockSubtreeResponse)
async def get_block_subtree(
    block_id: str,
    levels: int = Query(2, ge=2, le=3),
    db: AsyncSession = Depends(get_db)
):
    """Получение поддерева блока"""
    block_service = BlockService(db)

    blocks = await block_service.get_subtree(block_id, levels)

    return BlockSubtreeResponse(
        root_id=block_id,
        levels=levels,
        blocks=[BlockResponse.from_entity(block) for block in blocks]
    )


@router.delete("/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_block(
    block_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Удаление блока"""
    block_service = BlockService(db)

    success = await block_service.delete_block(block_id)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Block not found"
        )
