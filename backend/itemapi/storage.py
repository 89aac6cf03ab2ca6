import logging
import threading
from typing import Optional

from itemapi.schemas import Item, ItemCreate

logger = logging.getLogger(__name__)


class ItemStore:
    """
    In-memory item collection with sequential id assignment.

    Ids start at 1 and are never reused. The lock covers both the counter
    and the list so concurrent creates get distinct ids in append order.
    """

    def __init__(self):
        self._items: list[Item] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def add_item(self, candidate: ItemCreate) -> Item:
        with self._lock:
            stored = Item(id=self._next_id, **candidate.model_dump())
            self._next_id += 1
            self._items.append(stored)
        logger.info("stored item id=%s name=%r", stored.id, stored.name)
        return stored

    def get_item_by_id(self, item_id: int) -> Optional[Item]:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        return None
