from typing import Optional, Dict, Any
from enum import Enum


CARD_TYPE = "card"
COMMENT_TYPE = "comment"
CONTENT_TYPES = frozenset({"text", "image"})


class BlockKind(Enum):
    """Вид блока по полю type"""
    CARD = "card"
    COMMENT = "comment"
    CONTENT = "content"
    OTHER = "other"


class Block:
    """Блок: запись с типом-дискриминатором и произвольными полями"""

    def __init__(
        self,
        id: str,
        type: Optional[str] = None,
        parent_id: Optional[str] = None,
        root_id: Optional[str] = None,
        created_by: Optional[str] = None,
        title: str = "",
        fields: Optional[Dict[str, Any]] = None,
        order: Optional[float] = None,
        create_at: Optional[int] = None,
        update_at: Optional[int] = None,
        delete_at: int = 0
    ):
        self.id = id
        self.type = type
        self.parent_id = parent_id
        self.root_id = root_id
        self.created_by = created_by
        self.title = title
        self.fields = fields if fields is not None else {}
        self.order = order
        self.create_at = create_at
        self.update_at = update_at
        self.delete_at = delete_at

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация блока в словарь (camelCase, как в API клиента)"""
        return {
            "id": self.id,
            "type": self.type,
            "parentId": self.parent_id,
            "rootId": self.root_id,
            "createdBy": self.created_by,
            "title": self.title,
            "fields": dict(self.fields),
            "order": self.order,
            "createAt": self.create_at,
            "updateAt": self.update_at,
            "deleteAt": self.delete_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Block":
        """Десериализация блока из словаря"""
        return cls(
            id=data["id"],
            type=data.get("type"),
            parent_id=data.get("parentId"),
            root_id=data.get("rootId"),
            created_by=data.get("createdBy"),
            title=data.get("title") or "",
            fields=data.get("fields") or {},
            order=data.get("order"),
            create_at=data.get("createAt"),
            update_at=data.get("updateAt"),
            delete_at=data.get("deleteAt") or 0
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Block):
            return False
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Block(id={self.id}, type={self.type})"


def classify_block(block: Block) -> BlockKind:
    """Определение вида блока; неизвестные и пустые типы - OTHER"""
    if block.type == CARD_TYPE:
        return BlockKind.CARD
    if block.type == COMMENT_TYPE:
        return BlockKind.COMMENT
    if block.type in CONTENT_TYPES:
        return BlockKind.CONTENT
    return BlockKind.OTHER
