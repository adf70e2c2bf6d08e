"""Entry point for the warehouse demo."""

from __future__ import annotations

from ..core.config import configure_logging, get_settings
from ..core.types import ElectronicItem
from ..facade.repository import Repository
from .main import build_warehouse


def print_all_items(repo: Repository) -> None:
    for item in repo.get_all().value or []:
        print(f"{item.id}: {item.name} - Qty: {item.quantity}")


def main():  # pragma: no cover - manual run
    settings = get_settings()
    configure_logging(settings)
    wh = build_warehouse(settings)

    print("Grocery Items:")
    print_all_items(wh.groceries)
    print("Electronic Items:")
    print_all_items(wh.electronics)

    # each of these fails, is reported, and the run continues
    wh.electronics.add_item(ElectronicItem(1, "DuplicateLaptop", 1, "HP", 12))
    wh.groceries.remove_item(999)
    wh.electronics.update_quantity(2, -5)

    wh.electronics.increase_stock(1, 3)
    print("Electronic Items after restock:")
    print_all_items(wh.electronics)

    for name, outcome in wh.save_all().items():
        if outcome.ok:
            print(f"Saved {outcome.value} {name} item(s)")


if __name__ == "__main__":  # pragma: no cover
    main()
