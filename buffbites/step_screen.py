"""Shared base screens for the ordering steps."""

from __future__ import annotations

from typing import Any, Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from buffbites.models import OrderUiState
from buffbites.navigation import FlowEvent, OrderFlow, OrderScreen
from buffbites.rendering import format_option_rows

IntentHandler = Callable[[FlowEvent, Any], None]


class OrderStepScreen(Screen[None]):
    """One step of the ordering flow, rendered from order snapshots."""

    BINDINGS = [
        ("escape", "app.navigate_up", "Back"),
    ]

    CSS = """
    OrderStepScreen {
        align: center top;
    }

    #step-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
        margin-top: 1;
    }

    #step-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #step-body {
        margin-bottom: 1;
    }

    #step-footer {
        margin-bottom: 1;
    }

    #step-help {
        color: $text-muted;
    }
    """

    order_screen: OrderScreen = OrderScreen.START

    def __init__(self, flow: OrderFlow, on_intent: IntentHandler) -> None:
        super().__init__()
        self.flow = flow
        self.on_intent = on_intent

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="step-dialog"):
            yield Static(self.order_screen.title, id="step-title")
            yield Static(id="step-body")
            yield Static(id="step-footer")
            yield Static(id="step-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_screen_resume(self) -> None:
        self._refresh_content()

    def refresh_order(self, state: OrderUiState) -> None:
        """Redraw from a new order snapshot."""
        if not self.is_mounted:
            return
        self._refresh_content(state)

    def help_hint(self) -> str:
        return ""

    def render_body(self, state: OrderUiState) -> Text:
        return Text()

    def render_footer(self, state: OrderUiState) -> Text:
        return Text()

    def _refresh_content(self, state: OrderUiState | None = None) -> None:
        if state is None:
            state = self.flow.state
        try:
            body = self.query_one("#step-body", Static)
        except NoMatches:
            return
        body.update(self.render_body(state))
        self.query_one("#step-footer", Static).update(self.render_footer(state))
        help_line = self.help_hint()
        if self.flow.can_navigate_back:
            help_line = f"{help_line}  Esc back" if help_line else "Esc back"
        self.query_one("#step-help", Static).update(help_line)


class OptionStepScreen(OrderStepScreen):
    """A step that offers a cursor-driven list of options."""

    BINDINGS = [
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "choose_current", "Select"),
    ]

    cursor_index = reactive(0)
    radio = False

    def option_labels(self, state: OrderUiState) -> list[Text]:
        return []

    def selected_index(self, state: OrderUiState) -> int | None:
        return None

    def choose(self, index: int) -> None:
        """Emit the intent for the option at ``index``."""

    def action_move_cursor(self, delta: int) -> None:
        labels = self.option_labels(self.flow.state)
        if not labels:
            return
        self.cursor_index = (self.cursor_index + delta) % len(labels)
        self._refresh_content()

    def action_choose_current(self) -> None:
        labels = self.option_labels(self.flow.state)
        if not labels:
            return
        self.choose(self.cursor_index)

    def render_body(self, state: OrderUiState) -> Text:
        labels = self.option_labels(state)
        if not labels:
            return Text("(nothing to choose)", style="dim")
        if self.cursor_index >= len(labels):
            self.cursor_index = 0
        return format_option_rows(labels, self.cursor_index, self.selected_index(state), radio=self.radio)
