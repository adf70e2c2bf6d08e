"""Sample data and environment builders for the demo drivers and tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional

from ..core.config import Settings, get_settings
from ..core.types import ElectronicItem, GroceryItem, InventoryItem
from ..facade.repository import Repository
from ..facade.warehouse import Warehouse


def sample_electronics() -> List[ElectronicItem]:
    return [
        ElectronicItem(1, "Laptop", 5, "Dell", 24),
        ElectronicItem(2, "Smartphone", 10, "Samsung", 12),
    ]


def sample_groceries(today: Optional[date] = None) -> List[GroceryItem]:
    today = today or date.today()
    return [
        GroceryItem(1, "Milk", 20, today + timedelta(days=7)),
        GroceryItem(2, "Bread", 15, today + timedelta(days=3)),
    ]


def sample_inventory(now: Optional[datetime] = None) -> List[InventoryItem]:
    now = now or datetime.now()
    names = [("Laptop", 5), ("Chair", 15), ("Desk", 8), ("Mouse", 25), ("Keyboard", 12)]
    return [InventoryItem(i, name, qty, now) for i, (name, qty) in enumerate(names, 1)]


def build_warehouse(settings: Optional[Settings] = None) -> Warehouse:
    wh = Warehouse(settings)
    for e in sample_electronics():
        wh.electronics.add_item(e)
    for g in sample_groceries():
        wh.groceries.add_item(g)
    return wh


def build_inventory_log(settings: Optional[Settings] = None) -> Repository[InventoryItem]:
    settings = settings or get_settings()
    return Repository("inventory", InventoryItem, settings.snapshot_path("inventory"))
