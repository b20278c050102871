from app.domains.blocks.entities import (
    Block, BlockKind, classify_block, CARD_TYPE, COMMENT_TYPE, CONTENT_TYPES
)
from app.domains.blocks.schemas import (
    BlockBase, BlockCreate, BlockResponse, BlockSubtreeResponse
)

__all__ = [
    "Block", "BlockKind", "classify_block", "CARD_TYPE", "COMMENT_TYPE", "CONTENT_TYPES",
    "BlockBase", "BlockCreate", "BlockResponse", "BlockSubtreeResponse"
]
