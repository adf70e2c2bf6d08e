"""Core record types held by the stores.

Every record is a frozen dataclass with an integer ``id`` and a ``quantity``.
The kinds deliberately share no base class; stores are generic over the
``Stocked`` protocol instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol, TypeVar


class Keyed(Protocol):
    @property
    def id(self) -> int: ...


class Stocked(Keyed, Protocol):
    @property
    def quantity(self) -> int: ...


T = TypeVar("T", bound=Stocked)


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date


@dataclass(frozen=True)
class InventoryItem:
    id: int
    name: str
    quantity: int
    date_added: datetime  # when the record was logged
