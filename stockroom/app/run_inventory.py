"""Entry point for the inventory record demo: save, then reload into a new log."""

from __future__ import annotations

from ..core.config import configure_logging, get_settings
from .main import build_inventory_log, sample_inventory


def main():  # pragma: no cover - manual run
    settings = get_settings()
    configure_logging(settings)

    log = build_inventory_log(settings)
    for item in sample_inventory():
        log.add_item(item)
    if log.save_snapshot().ok:
        print("Data saved to file.")

    fresh = build_inventory_log(settings)
    fresh.load_snapshot()
    print("Loaded data from file:")
    for item in fresh.get_all().value or []:
        print(
            f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
            f"Date Added: {item.date_added}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
