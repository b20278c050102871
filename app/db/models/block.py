from sqlalchemy import Column, String, Text, Float, BigInteger, JSON, Index

from app.core.db import Base


class Block(Base):
    __tablename__ = "blocks"

    id = Column(String(64), primary_key=True)
    parent_id = Column(String(64), nullable=True)
    root_id = Column(String(64), nullable=True)
    created_by = Column(String(64), nullable=True)
    type = Column(String(32), nullable=True)
    title = Column(Text, default="")
    fields = Column(JSON, default=dict)
    order = Column(Float, nullable=True)
    create_at = Column(BigInteger, nullable=True)
    update_at = Column(BigInteger, nullable=True)
    delete_at = Column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        Index("ix_blocks_parent_id_delete_at", "parent_id", "delete_at"),
    )
