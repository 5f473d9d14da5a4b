"""Order state owned by a per-session controller."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from buffbites.models import MenuItem, OrderUiState, Restaurant

OrderListener = Callable[[OrderUiState], None]


class OrderController:
    """Owns the in-progress order and exposes the only mutation API.

    Every mutation replaces the held snapshot and pushes the new one to
    subscribers, so views never read a half-updated order.
    """

    def __init__(self) -> None:
        self._state = OrderUiState()
        self._listeners: list[OrderListener] = []

    def current_state(self) -> OrderUiState:
        return self._state

    def set_restaurant(self, restaurant: Restaurant) -> None:
        self._commit(replace(self._state, restaurant=restaurant))

    def update_meal(self, item: MenuItem) -> None:
        """Select a meal; the subtotal always follows the selected item."""
        self._commit(replace(self._state, menu_item=item, subtotal=item.price))

    def update_delivery_time(self, time: str) -> None:
        self._commit(replace(self._state, delivery_time=time))

    def reset_order(self) -> None:
        self._commit(OrderUiState())

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register a snapshot listener and return a callable that removes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: OrderListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _commit(self, state: OrderUiState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
