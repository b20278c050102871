from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List, Dict, Any

from app.domains.blocks.entities import Block


class BlockBase(BaseModel):
    """Базовая схема блока (camelCase на границе API)"""
    id: str = Field(..., min_length=1, max_length=64)
    type: Optional[str] = Field(None, max_length=32)
    parent_id: Optional[str] = Field(None, alias="parentId", max_length=64)
    root_id: Optional[str] = Field(None, alias="rootId", max_length=64)
    created_by: Optional[str] = Field(None, alias="createdBy", max_length=64)
    title: str = ""
    fields: Dict[str, Any] = Field(default_factory=dict)
    order: Optional[float] = None
    create_at: Optional[int] = Field(None, alias="createAt", ge=0)
    update_at: Optional[int] = Field(None, alias="updateAt", ge=0)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if not v.strip():
            raise ValueError('Block id cannot be empty')
        return v.strip()


class BlockCreate(BlockBase):
    """Схема для создания или замены блока"""
    pass


class BlockResponse(BlockBase):
    """Схема для ответа с данными блока"""
    delete_at: int = Field(0, alias="deleteAt")

    @classmethod
    def from_entity(cls, block: Block) -> "BlockResponse":
        return cls.model_validate(block.to_dict())


class BlockSubtreeResponse(BaseModel):
    """Схема для ответа с поддеревом блоков"""
    root_id: str = Field(..., alias="rootId")
    levels: int
    blocks: List[BlockResponse]

    model_config = ConfigDict(populate_by_name=True)
