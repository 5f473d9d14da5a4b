"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from textual.app import App
from textual.binding import Binding

from buffbites.config import resolve_debug_log_path
from buffbites.data import DELIVERY_TIME_OPTIONS, RESTAURANTS
from buffbites.delivery_screen import ChooseDeliveryTimeScreen
from buffbites.meal_screen import ChooseMenuScreen
from buffbites.models import OrderUiState
from buffbites.navigation import FlowEvent, OrderFlow, OrderScreen
from buffbites.order import OrderController
from buffbites.start_screen import StartOrderScreen
from buffbites.step_screen import OrderStepScreen
from buffbites.summary_screen import OrderSummaryScreen


class BuffBitesApp(App):
    """A Textual app for ordering one meal for delivery."""

    TITLE = "BuffBites"
    SUB_TITLE = OrderScreen.START.title

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, flow: OrderFlow | None = None) -> None:
        super().__init__()
        self.flow = flow if flow is not None else OrderFlow(OrderController())
        self._debug_log_path = Path(resolve_debug_log_path())
        self.flow.controller.subscribe(self._on_order_changed)
        self.flow.subscribe(self._on_screen_changed)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except Exception:
            # Logging must never interfere with app flow.
            return

    def on_mount(self) -> None:
        self._log_debug(f"on_mount screen={self.flow.current_screen.name}")
        self._sync_screens()

    def handle_intent(self, event: FlowEvent, payload: Any = None) -> None:
        """Forward a screen intent to the flow."""
        self._log_debug(f"intent event={event.name} screen={self.flow.current_screen.name} payload={payload!r}")
        self.flow.dispatch(event, payload)

    def action_navigate_up(self) -> None:
        if not self.flow.can_navigate_back:
            return
        self._log_debug(f"navigate_up from={self.flow.current_screen.name}")
        self.flow.navigate_up()

    def _on_order_changed(self, state: OrderUiState) -> None:
        if state.is_empty:
            self._log_debug("order_reset")
        if not self.is_running:
            return
        screen = self.screen
        if isinstance(screen, OrderStepScreen):
            screen.refresh_order(state)

    def _on_screen_changed(self, order_screen: OrderScreen) -> None:
        self._log_debug(f"screen_changed to={order_screen.name} stack={[s.name for s in self.flow.back_stack]}")
        if not self.is_running:
            return
        self._sync_screens()

    def _build_screen(self, order_screen: OrderScreen) -> OrderStepScreen:
        if order_screen is OrderScreen.START:
            return StartOrderScreen(self.flow, self.handle_intent, RESTAURANTS)
        if order_screen is OrderScreen.MEAL:
            return ChooseMenuScreen(self.flow, self.handle_intent)
        if order_screen is OrderScreen.DELIVERY:
            return ChooseDeliveryTimeScreen(self.flow, self.handle_intent, DELIVERY_TIME_OPTIONS)
        return OrderSummaryScreen(self.flow, self.handle_intent)

    def _sync_screens(self) -> None:
        """Make the pushed screens mirror the flow's back stack."""
        target = list(self.flow.back_stack)
        mounted = [screen for screen in self.screen_stack if isinstance(screen, OrderStepScreen)]

        keep = 0
        while keep < min(len(target), len(mounted)) and mounted[keep].order_screen is target[keep]:
            keep += 1

        for _ in range(len(mounted) - keep):
            self.pop_screen()
        for order_screen in target[keep:]:
            self.push_screen(self._build_screen(order_screen))

        self.sub_title = self.flow.current_screen.title
