"""Meal picker for the selected restaurant."""

from __future__ import annotations

from rich.text import Text

from buffbites.models import MenuItem, OrderUiState
from buffbites.navigation import FlowEvent, OrderFlow, OrderScreen
from buffbites.rendering import format_menu_item_label, format_subtotal
from buffbites.step_screen import IntentHandler, OptionStepScreen


class ChooseMenuScreen(OptionStepScreen):
    """Choose one meal; Next is allowed once a meal from this menu is selected."""

    BINDINGS = [
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
    ]

    order_screen = OrderScreen.MEAL
    radio = True

    def __init__(self, flow: OrderFlow, on_intent: IntentHandler) -> None:
        super().__init__(flow, on_intent)
        self.system_status = ""

    def _menu_items(self, state: OrderUiState) -> tuple[MenuItem, ...]:
        if state.restaurant is None:
            return ()
        return state.restaurant.menu_items

    def option_labels(self, state: OrderUiState) -> list[Text]:
        return [format_menu_item_label(item) for item in self._menu_items(state)]

    def selected_index(self, state: OrderUiState) -> int | None:
        items = self._menu_items(state)
        if state.menu_item is None or state.menu_item not in items:
            return None
        return items.index(state.menu_item)

    def choose(self, index: int) -> None:
        self.system_status = ""
        self.on_intent(FlowEvent.MEAL_SELECTED, self._menu_items(self.flow.state)[index])

    def action_next(self) -> None:
        if not self.flow.can_advance:
            self.system_status = "Choose a meal first"
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
        return "J/K/↑/↓ move, Enter select, N next, C cancel order"
