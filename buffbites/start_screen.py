"""Restaurant picker shown at the start of every order."""

from __future__ import annotations

from rich.text import Text

from buffbites.models import OrderUiState, Restaurant
from buffbites.navigation import FlowEvent, OrderFlow, OrderScreen
from buffbites.rendering import format_restaurant_label
from buffbites.step_screen import IntentHandler, OptionStepScreen


class StartOrderScreen(OptionStepScreen):
    """Pick a restaurant to start an order."""

    order_screen = OrderScreen.START

    def __init__(self, flow: OrderFlow, on_intent: IntentHandler, restaurants: list[Restaurant]) -> None:
        super().__init__(flow, on_intent)
        self.restaurants = restaurants

    def option_labels(self, state: OrderUiState) -> list[Text]:
        return [format_restaurant_label(restaurant) for restaurant in self.restaurants]

    def choose(self, index: int) -> None:
        self.on_intent(FlowEvent.RESTAURANT_SELECTED, self.restaurants[index])

    def help_hint(self) -> str:
        return "J/K/↑/↓ move, Enter start order, Ctrl+Q quit"
