"""Order review screen."""

from __future__ import annotations

from rich.text import Text

from buffbites.models import OrderUiState
from buffbites.navigation import FlowEvent, OrderScreen
from buffbites.rendering import format_order_summary
from buffbites.step_screen import OrderStepScreen


class OrderSummaryScreen(OrderStepScreen):
    """Review the order, then submit or cancel it."""

    BINDINGS = [
        ("s", "submit", "Submit"),
        ("c", "cancel", "Cancel"),
    ]

    order_screen = OrderScreen.SUMMARY

    def render_body(self, state: OrderUiState) -> Text:
        return format_order_summary(state)

    def action_submit(self) -> None:
        self.on_intent(FlowEvent.SUBMIT, None)

    def action_cancel(self) -> None:
        self.on_intent(FlowEvent.CANCEL, None)

    def help_hint(self) -> str:
        return "S submit order, C cancel order"
