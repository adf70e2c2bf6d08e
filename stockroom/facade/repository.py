"""Per-category repository wrapping one store and its snapshot file.

Each call returns an ``Outcome`` instead of raising; failures are logged and
counted, and the caller carries on with the next operation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from ..core.errors import InvalidQuantity, StoreError
from ..core.types import T
from ..io.metrics import inc_failure
from ..io.persistence import LoadStatus, SnapshotAdapter
from ..state.store import EntityStore, is_int

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class Outcome(Generic[V]):
    ok: bool
    value: Optional[V] = None
    error: Optional[StoreError] = None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    @classmethod
    def success(cls, value: Any = None) -> "Outcome[Any]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "Outcome[Any]":
        return cls(ok=False, error=error)


class Repository(Generic[T]):
    def __init__(
        self,
        name: str,
        kind: Type[T],
        snapshot_path: str | Path,
        store: Optional[EntityStore[T]] = None,
    ):
        self.name = name
        self.kind = kind
        self.snapshot_path = Path(snapshot_path)
        self.store: EntityStore[T] = store if store is not None else EntityStore()
        self.adapter: SnapshotAdapter[T] = SnapshotAdapter(kind)

    def _run(self, op: str, fn: Callable[[], V]) -> Outcome[V]:
        try:
            return Outcome.success(fn())
        except StoreError as e:
            inc_failure(e.kind)
            logger.warning("[%s.%s] Error: %s", self.name, op, e)
            return Outcome.failure(e)

    def add_item(self, item: T) -> Outcome[None]:
        return self._run("add_item", lambda: self.store.add_item(item))

    def get_by_id(self, item_id: int) -> Outcome[T]:
        return self._run("get_by_id", lambda: self.store.get_by_id(item_id))

    def remove_item(self, item_id: int) -> Outcome[T]:
        return self._run("remove_item", lambda: self.store.remove_item(item_id))

    def update_quantity(self, item_id: int, new_quantity: int) -> Outcome[T]:
        return self._run(
            "update_quantity", lambda: self.store.update_quantity(item_id, new_quantity)
        )

    def get_all(self) -> Outcome[List[T]]:
        return Outcome.success(self.store.get_all())

    def increase_stock(self, item_id: int, amount: int) -> Outcome[T]:
        def _increase() -> T:
            if not is_int(amount):
                raise InvalidQuantity(amount)
            current = self.store.get_by_id(item_id)
            return self.store.update_quantity(item_id, current.quantity + amount)

        return self._run("increase_stock", _increase)

    def save_snapshot(self) -> Outcome[int]:
        return self._run(
            "save_snapshot", lambda: self.adapter.save(self.store, self.snapshot_path)
        )

    def load_snapshot(self) -> Outcome[LoadStatus]:
        return self._run(
            "load_snapshot", lambda: self.adapter.load(self.store, self.snapshot_path)
        )
