"""In-memory keyed store with enforced invariants."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Generic, Iterable, List

from ..core.errors import DuplicateKey, InvalidKey, InvalidQuantity, NotFound
from ..core.types import T

logger = logging.getLogger(__name__)


def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def valid_key(value: object) -> bool:
    return is_int(value) and value > 0  # type: ignore[operator]


def valid_quantity(value: object) -> bool:
    return is_int(value) and value >= 0  # type: ignore[operator]


class EntityStore(Generic[T]):
    """Mapping of id -> record for a single record kind.

    Records are frozen dataclasses, so the instances handed out are read-only
    views; quantity updates swap in a copy.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[int, T] = {}
        for item in items:
            self.add_item(item)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def add_item(self, item: T) -> None:
        if not valid_key(item.id):
            raise InvalidKey(item.id)
        if not valid_quantity(item.quantity):
            raise InvalidQuantity(item.quantity)
        if item.id in self._items:
            raise DuplicateKey(item.id)
        self._items[item.id] = item
        logger.debug("added id=%s", item.id)

    def get_by_id(self, item_id: int) -> T:
        try:
            return self._items[item_id]
        except KeyError:
            raise NotFound(item_id) from None

    def remove_item(self, item_id: int) -> T:
        try:
            item = self._items.pop(item_id)
        except KeyError:
            raise NotFound(item_id) from None
        logger.debug("removed id=%s", item_id)
        return item

    def update_quantity(self, item_id: int, new_quantity: int) -> T:
        # malformed input is rejected before looking at the target
        if not valid_quantity(new_quantity):
            raise InvalidQuantity(new_quantity)
        updated = replace(self.get_by_id(item_id), quantity=new_quantity)
        self._items[item_id] = updated
        logger.debug("id=%s quantity=%s", item_id, new_quantity)
        return updated

    def get_all(self) -> List[T]:
        return list(self._items.values())

    def clear(self) -> None:
        self._items.clear()

    def replace_all(self, items: Iterable[T]) -> None:
        """Bulk insert used by snapshot loads. Callers validate beforehand."""
        self._items = {item.id: item for item in items}
