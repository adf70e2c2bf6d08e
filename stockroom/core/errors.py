"""Failure kinds raised by stores and snapshot adapters."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union


class StoreError(Exception):
    """Base for every declared failure. ``kind`` is a stable short name."""

    kind = "store_error"


class DuplicateKey(StoreError):
    kind = "duplicate_key"

    def __init__(self, key: Any):
        super().__init__(f"Item with ID {key} already exists.")
        self.key = key


class NotFound(StoreError):
    kind = "not_found"

    def __init__(self, key: Any):
        super().__init__(f"Item with ID {key} not found.")
        self.key = key


class InvalidQuantity(StoreError):
    kind = "invalid_quantity"

    def __init__(self, quantity: Any):
        super().__init__(f"Quantity must be a non-negative integer (got {quantity!r}).")
        self.quantity = quantity


class InvalidKey(StoreError):
    kind = "invalid_key"

    def __init__(self, key: Any):
        super().__init__(f"Item ID must be a positive integer (got {key!r}).")
        self.key = key


class StorageIOError(StoreError):
    kind = "io_failure"

    def __init__(self, operation: str, path: Union[str, Path], reason: str = ""):
        msg = f"Snapshot {operation} failed for {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.operation = operation  # "save" | "load"
        self.path = Path(path)


class MalformedSnapshot(StoreError):
    kind = "malformed_snapshot"

    def __init__(self, reason: str, path: Union[str, Path, None] = None):
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Malformed snapshot{where}: {reason}")
        self.reason = reason
        self.path = Path(path) if path is not None else None
