"""Rendering helpers for option lists and order summaries."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from buffbites.config import CURRENCY_SYMBOL
from buffbites.models import MenuItem, OrderUiState, Restaurant


def format_price(amount: Decimal) -> str:
    """Format an amount as currency with two decimals."""
    return f"{CURRENCY_SYMBOL}{amount.quantize(Decimal('0.01'))}"


def cuisine_style(cuisine: str) -> str:
    """Return a consistent badge style for cuisine tags."""
    if cuisine == "Burgers":
        return "bold #ffffff on #b23a48"
    if cuisine == "Pizza":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_restaurant_label(restaurant: Restaurant) -> Text:
    text = Text()
    text.append(f" {restaurant.cuisine} ", style=cuisine_style(restaurant.cuisine))
    text.append(f" {restaurant.name}")
    return text


def format_menu_item_label(item: MenuItem) -> Text:
    text = Text()
    text.append(item.name)
    text.append(f"  {format_price(item.price)}", style="bold")
    text.append(f"\n      {item.description}", style="dim")
    return text


def format_option_rows(
    labels: list[Text],
    cursor_index: int,
    selected_index: int | None = None,
    radio: bool = False,
) -> Text:
    """Render options with a cursor pointer and, for radio lists, a selection marker."""
    content = Text()
    for idx, label in enumerate(labels):
        if idx > 0:
            content.append("\n")
        pointer = "➤ " if idx == cursor_index else "  "
        content.append(pointer)
        if radio:
            is_selected = idx == selected_index
            content.append("(•) " if is_selected else "( ) ", style="bold" if is_selected else "")
        content.append_text(label)
    return content


def format_subtotal(state: OrderUiState) -> Text:
    text = Text()
    text.append("Subtotal: ", style="bold")
    text.append(format_price(state.subtotal))
    return text


def summary_lines(state: OrderUiState) -> list[tuple[str, str]]:
    """Label/value pairs shown on the summary screen."""
    return [
        ("Restaurant", state.restaurant.name if state.restaurant else "-"),
        ("Meal", state.menu_item.name if state.menu_item else "-"),
        ("Delivery time", state.delivery_time or "-"),
        ("Subtotal", format_price(state.subtotal)),
    ]


def format_order_summary(state: OrderUiState) -> Text:
    content = Text()
    for idx, (label, value) in enumerate(summary_lines(state)):
        if idx > 0:
            content.append("\n")
        content.append(f"{label}: ", style="bold")
        content.append(value)
    return content
