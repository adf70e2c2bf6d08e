"""JSON snapshot persistence for entity stores.

A snapshot is the whole store dumped as an indented JSON array, one object per
record. Saves go through a temporary sibling file and ``os.replace`` so an
interrupted write never leaves a half-written snapshot behind. Loads are
all-or-nothing: the document is fully decoded and validated before the store
is touched.
"""

from __future__ import annotations

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Generic, List, Type

from ..core.errors import MalformedSnapshot, StorageIOError
from ..core.types import T
from ..state.store import EntityStore, valid_key, valid_quantity
from .codec import decode, encode
from .metrics import inc_snapshot

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    LOADED = "LOADED"
    NO_DATA = "NO_DATA"


class SnapshotAdapter(Generic[T]):
    def __init__(self, kind: Type[T]):
        self.kind = kind

    def save(self, store: EntityStore[T], path: str | Path) -> int:
        p = Path(path)
        records = [encode(item) for item in store.get_all()]
        text = json.dumps(records, indent=2, ensure_ascii=False)
        tmp = p.with_name(p.name + ".tmp")
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, p)
        except OSError as e:
            inc_snapshot("save", "error")
            try:
                tmp.unlink()
            except OSError:
                pass  # never created, or already gone
            raise StorageIOError("save", p, str(e)) from e
        inc_snapshot("save", "ok")
        logger.info("saved %d %s record(s) to %s", len(records), self.kind.__name__, p)
        return len(records)

    def load(self, store: EntityStore[T], path: str | Path) -> LoadStatus:
        p = Path(path)
        try:
            with p.open("rb") as f:
                raw = f.read()
        except FileNotFoundError:
            store.clear()
            inc_snapshot("load", "no_data")
            logger.info("No data file found at %s", p)
            return LoadStatus.NO_DATA
        except OSError as e:
            inc_snapshot("load", "error")
            raise StorageIOError("load", p, str(e)) from e
        try:
            items = self._parse(raw)
        except MalformedSnapshot as e:
            inc_snapshot("load", "malformed")
            raise MalformedSnapshot(e.reason, p) from e
        store.replace_all(items)
        inc_snapshot("load", "ok")
        logger.info("loaded %d %s record(s) from %s", len(items), self.kind.__name__, p)
        return LoadStatus.LOADED

    def _parse(self, raw: bytes) -> List[T]:
        try:
            doc = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError:
            raise MalformedSnapshot("not valid UTF-8") from None
        except json.JSONDecodeError as e:
            raise MalformedSnapshot(f"invalid JSON ({e.msg} at line {e.lineno})") from None
        except (RecursionError, ValueError) as e:
            raise MalformedSnapshot(f"invalid JSON ({type(e).__name__})") from None
        if not isinstance(doc, list):
            raise MalformedSnapshot("top level must be an array of records")
        items: List[T] = []
        seen = set()
        for i, obj in enumerate(doc):
            try:
                item = decode(self.kind, obj)
            except MalformedSnapshot as e:
                raise MalformedSnapshot(f"record {i}: {e.reason}") from None
            if not valid_key(item.id):
                raise MalformedSnapshot(f"record {i}: id must be positive")
            if not valid_quantity(item.quantity):
                raise MalformedSnapshot(f"record {i}: quantity cannot be negative")
            if item.id in seen:
                raise MalformedSnapshot(f"record {i}: duplicate id {item.id}")
            seen.add(item.id)
            items.append(item)
        return items
