"""Domain models for the ordering flow."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MenuItem:
    """A single orderable dish."""

    item_id: str
    name: str
    description: str
    price: Decimal


@dataclass(frozen=True)
class Restaurant:
    """A restaurant and the dishes it offers."""

    restaurant_id: str
    name: str
    cuisine: str
    menu_items: tuple[MenuItem, ...] = ()


@dataclass(frozen=True)
class OrderUiState:
    """Immutable snapshot of the in-progress order."""

    restaurant: Restaurant | None = None
    menu_item: MenuItem | None = None
    delivery_time: str | None = None
    subtotal: Decimal = Decimal("0")

    @property
    def is_empty(self) -> bool:
        return self == OrderUiState()
