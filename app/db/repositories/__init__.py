from app.db.repositories.block_repository import BlockRepository, DatabaseBlockSource

__all__ = [
    "BlockRepository",
    "DatabaseBlockSource"
]
