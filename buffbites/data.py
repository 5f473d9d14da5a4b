"""Static restaurant, menu and delivery data."""

from __future__ import annotations

from decimal import Decimal

from buffbites.constant import (
    DELIVERY_TIME_OPTIONS,
    MENU_ITEM_IDS_BY_RESTAURANT,
    MENU_ITEM_META_BY_ID,
    RESTAURANT_META_BY_ID,
)
from buffbites.models import MenuItem, Restaurant

MENU_ITEMS_BY_ID: dict[str, MenuItem] = {
    item_id: MenuItem(
        item_id=item_id,
        name=meta["name"],
        description=meta["description"],
        price=Decimal(meta["price"]),
    )
    for item_id, meta in MENU_ITEM_META_BY_ID.items()
}

RESTAURANTS: list[Restaurant] = [
    Restaurant(
        restaurant_id=restaurant_id,
        name=meta["name"],
        cuisine=meta["cuisine"],
        menu_items=tuple(MENU_ITEMS_BY_ID[item_id] for item_id in MENU_ITEM_IDS_BY_RESTAURANT[restaurant_id]),
    )
    for restaurant_id, meta in RESTAURANT_META_BY_ID.items()
]

__all__ = [
    "DELIVERY_TIME_OPTIONS",
    "MENU_ITEMS_BY_ID",
    "RESTAURANTS",
    "lookup_menu_item",
    "lookup_restaurant",
]


def lookup_restaurant(restaurant_id: str) -> Restaurant:
    """Get a restaurant by id. Raises KeyError for unknown ids."""
    for restaurant in RESTAURANTS:
        if restaurant.restaurant_id == restaurant_id:
            return restaurant
    raise KeyError(restaurant_id)


def lookup_menu_item(item_id: str) -> MenuItem:
    """Get a menu item by id. Raises KeyError for unknown ids."""
    return MENU_ITEMS_BY_ID[item_id]
