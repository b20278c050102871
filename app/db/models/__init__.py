from app.db.models.block import Block

__all__ = [
    "Block"
]
