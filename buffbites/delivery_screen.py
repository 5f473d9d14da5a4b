"""Delivery time picker."""

from __future__ import annotations

from rich.text import Text

from buffbites.models import OrderUiState
from buffbites.navigation import FlowEvent, OrderFlow, OrderScreen
from buffbites.rendering import format_subtotal
from buffbites.step_screen import IntentHandler, OptionStepScreen


class ChooseDeliveryTimeScreen(OptionStepScreen):
    """Choose one of the offered delivery slots.

    Cancel here only steps back to the meal picker; the order is kept.
    """

    BINDINGS = [
        ("n", "next", "Next"),
        ("c", "cancel", "Back"),
    ]

    order_screen = OrderScreen.DELIVERY
    radio = True

    def __init__(self, flow: OrderFlow, on_intent: IntentHandler, options: list[str]) -> None:
        super().__init__(flow, on_intent)
        self.options = options
        self.system_status = ""

    def option_labels(self, state: OrderUiState) -> list[Text]:
        return [Text(option) for option in self.options]

    def selected_index(self, state: OrderUiState) -> int | None:
        if state.delivery_time not in self.options:
            return None
        return self.options.index(state.delivery_time)

    def choose(self, index: int) -> None:
        self.system_status = ""
        self.on_intent(FlowEvent.TIME_SELECTED, self.options[index])

    def action_next(self) -> None:
        if not self.flow.can_advance:
            self.system_status = "Choose a delivery time first"
            self._refresh_content()
            return
        self.on_intent(FlowEvent.NEXT, None)

    def action_cancel(self) -> None:
        self.on_intent(FlowEvent.CANCEL, None)

    def render_footer(self, state: OrderUiState) -> Text:
        text = format_subtotal(state)
        if self.system_status:
            text.append(f"\n{self.system_status}", style="#ffb3b3")
        return text

    def help_hint(self) -> str:
        return "J/K/↑/↓ move, Enter select, N next, C back to meals"
