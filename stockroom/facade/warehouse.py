"""Warehouse holding one repository per item category."""

from __future__ import annotations

from typing import Dict, Optional

from ..core.config import Settings, get_settings
from ..core.types import ElectronicItem, GroceryItem
from ..io.persistence import LoadStatus
from .repository import Outcome, Repository


class Warehouse:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.electronics: Repository[ElectronicItem] = Repository(
            "electronics", ElectronicItem, self.settings.snapshot_path("electronics")
        )
        self.groceries: Repository[GroceryItem] = Repository(
            "groceries", GroceryItem, self.settings.snapshot_path("groceries")
        )

    def repositories(self) -> Dict[str, Repository]:
        return {"electronics": self.electronics, "groceries": self.groceries}

    def save_all(self) -> Dict[str, Outcome[int]]:
        return {name: repo.save_snapshot() for name, repo in self.repositories().items()}

    def load_all(self) -> Dict[str, Outcome[LoadStatus]]:
        return {name: repo.load_snapshot() for name, repo in self.repositories().items()}
