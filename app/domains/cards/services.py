from typing import Dict, Optional
import logging

from app.domains.cards.entities import BlockSource, CardTree, CardTreeSnapshot

logger = logging.getLogger(__name__)


class CardTreeService:
    """Сервис деревьев карточек: по одному CardTree на карточку"""

    def __init__(self, source: BlockSource, serialize_syncs: bool = True):
        self.source = source
        self.serialize_syncs = serialize_syncs

        # In-memory хранилище деревьев карточек
        self._trees: Dict[str, CardTree] = {}

    def get_tree(self, card_id: str) -> CardTree:
        """Получение дерева карточки (создается при первом обращении)"""
        tree = self._trees.get(card_id)
        if tree is None:
            tree = CardTree(card_id, self.source, serialize_syncs=self.serialize_syncs)
            self._trees[card_id] = tree
            logger.debug(f"Created card tree for {card_id}")
        return tree

    def find_tree(self, card_id: str) -> Optional[CardTree]:
        return self._trees.get(card_id)

    async def sync_card(self, card_id: str) -> CardTreeSnapshot:
        """Синхронизация дерева карточки с источником блоков"""
        tree = self.get_tree(card_id)

        try:
            snapshot = await tree.sync()
        except Exception as e:
            logger.error(f"Error syncing card tree {card_id}: {e}")
            # Дерево без единой успешной синхронизации не храним
            if not tree.is_ready:
                self._discard(card_id, tree)
            raise

        if snapshot.root is None:
            logger.warning(f"Card {card_id} has no root block in its subtree")
            self._discard(card_id, tree)

        logger.info(
            f"Synced card tree {card_id}: "
            f"{len(snapshot.comments)} comments, {len(snapshot.contents)} contents"
        )
        return snapshot

    def forget(self, card_id: str) -> bool:
        """Удаление дерева карточки из памяти"""
        return self._trees.pop(card_id, None) is not None

    def _discard(self, card_id: str, tree: CardTree) -> None:
        # Другой запрос мог уже заменить дерево в реестре
        if self._trees.get(card_id) is tree:
            del self._trees[card_id]

    def __len__(self) -> int:
        return len(self._trees)
