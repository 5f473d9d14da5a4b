"""Editable static menu and delivery configuration."""

from __future__ import annotations

# Prices are strings so they convert to Decimal without float rounding.
MENU_ITEM_META_BY_ID: dict[str, dict[str, str]] = {
    "burger": {"name": "Burger", "description": "Beef patty, cheddar, pickles", "price": "8.00"},
    "fries": {"name": "Fries", "description": "Skin-on, sea salt", "price": "3.50"},
    "chicken_sandwich": {"name": "Chicken Sandwich", "description": "Crispy thigh, slaw", "price": "9.25"},
    "margherita": {"name": "Margherita Pizza", "description": "Tomato, mozzarella, basil", "price": "12.00"},
    "pepperoni": {"name": "Pepperoni Pizza", "description": "Tomato, mozzarella, pepperoni", "price": "13.50"},
    "garlic_knots": {"name": "Garlic Knots", "description": "Six knots, marinara", "price": "5.00"},
    "pad_thai": {"name": "Pad Thai", "description": "Rice noodles, tamarind, peanuts", "price": "11.75"},
    "green_curry": {"name": "Green Curry", "description": "Coconut, basil, jasmine rice", "price": "12.25"},
    "spring_rolls": {"name": "Spring Rolls", "description": "Four rolls, sweet chili", "price": "6.00"},
}

RESTAURANT_META_BY_ID: dict[str, dict[str, str]] = {
    "restaurant_a": {"name": "Restaurant A", "cuisine": "Burgers"},
    "restaurant_b": {"name": "Restaurant B", "cuisine": "Pizza"},
    "restaurant_c": {"name": "Restaurant C", "cuisine": "Thai"},
}

MENU_ITEM_IDS_BY_RESTAURANT: dict[str, list[str]] = {
    "restaurant_a": [
        "burger",
        "fries",
        "chicken_sandwich",
    ],
    "restaurant_b": [
        "margherita",
        "pepperoni",
        "garlic_knots",
    ],
    "restaurant_c": [
        "pad_thai",
        "green_curry",
        "spring_rolls",
    ],
}

DELIVERY_TIME_OPTIONS: list[str] = [
    "Mon Sep 18 6:00 PM",
    "Mon Sep 18 7:00 PM",
    "Mon Sep 18 8:00 PM",
    "Mon Sep 18 9:00 PM",
]
