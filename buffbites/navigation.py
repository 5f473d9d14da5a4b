"""Linear navigation flow for the ordering screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from buffbites.models import MenuItem, OrderUiState, Restaurant
from buffbites.order import OrderController


class OrderScreen(Enum):
    """Screens of the ordering flow, in forward order."""

    START = "BuffBites"
    MEAL = "Choose Meal"
    DELIVERY = "Choose Delivery Time"
    SUMMARY = "Order Summary"

    @property
    def title(self) -> str:
        return self.value


class FlowEvent(Enum):
    """User intents emitted by the screens."""

    RESTAURANT_SELECTED = "restaurant_selected"
    MEAL_SELECTED = "meal_selected"
    TIME_SELECTED = "time_selected"
    NEXT = "next"
    CANCEL = "cancel"
    SUBMIT = "submit"


class InvalidTransitionError(ValueError):
    """Raised when an event has no transition from the current screen."""


_STAY = "stay"
_PUSH = "push"
_POP = "pop"
_POP_TO_START = "pop_to_start"

OrderEffect = Callable[[OrderController, Any], None]


def _set_restaurant(controller: OrderController, restaurant: Restaurant) -> None:
    controller.set_restaurant(restaurant)


def _update_meal(controller: OrderController, item: MenuItem) -> None:
    controller.update_meal(item)


def _update_delivery_time(controller: OrderController, time: str) -> None:
    controller.update_delivery_time(time)


def _reset_order(controller: OrderController, _payload: Any) -> None:
    controller.reset_order()


@dataclass(frozen=True)
class Transition:
    target: OrderScreen
    stack_op: str
    effect: OrderEffect | None = None
    needs_payload: bool = False


TRANSITIONS: dict[tuple[OrderScreen, FlowEvent], Transition] = {
    (OrderScreen.START, FlowEvent.RESTAURANT_SELECTED): Transition(
        OrderScreen.MEAL, _PUSH, _set_restaurant, needs_payload=True
    ),
    (OrderScreen.MEAL, FlowEvent.MEAL_SELECTED): Transition(OrderScreen.MEAL, _STAY, _update_meal, needs_payload=True),
    (OrderScreen.MEAL, FlowEvent.NEXT): Transition(OrderScreen.DELIVERY, _PUSH),
    (OrderScreen.MEAL, FlowEvent.CANCEL): Transition(OrderScreen.START, _POP_TO_START, _reset_order),
    (OrderScreen.DELIVERY, FlowEvent.TIME_SELECTED): Transition(
        OrderScreen.DELIVERY, _STAY, _update_delivery_time, needs_payload=True
    ),
    (OrderScreen.DELIVERY, FlowEvent.NEXT): Transition(OrderScreen.SUMMARY, _PUSH),
    # Back one step only; the order is kept.
    (OrderScreen.DELIVERY, FlowEvent.CANCEL): Transition(OrderScreen.MEAL, _POP),
    (OrderScreen.SUMMARY, FlowEvent.SUBMIT): Transition(OrderScreen.START, _POP_TO_START, _reset_order),
    (OrderScreen.SUMMARY, FlowEvent.CANCEL): Transition(OrderScreen.START, _POP_TO_START, _reset_order),
}

ScreenListener = Callable[[OrderScreen], None]


class OrderFlow:
    """Drives the Start -> Meal -> Delivery -> Summary flow over an order controller.

    The flow owns the back stack. A transition moves the stack first, then
    applies the order side effect, then publishes the screen change. A
    listener that raises therefore never leaves the order and the stack out
    of step.
    """

    def __init__(self, controller: OrderController | None = None) -> None:
        self.controller = controller if controller is not None else OrderController()
        self._back_stack: list[OrderScreen] = [OrderScreen.START]
        self._listeners: list[ScreenListener] = []

    @property
    def current_screen(self) -> OrderScreen:
        return self._back_stack[-1]

    @property
    def back_stack(self) -> tuple[OrderScreen, ...]:
        return tuple(self._back_stack)

    @property
    def state(self) -> OrderUiState:
        return self.controller.current_state()

    @property
    def can_navigate_back(self) -> bool:
        return len(self._back_stack) > 1

    @property
    def can_advance(self) -> bool:
        """Whether the current screen's selection is complete enough for NEXT."""
        state = self.state
        if self.current_screen is OrderScreen.MEAL:
            # A meal kept from another restaurant's menu does not count.
            return state.restaurant is not None and state.menu_item in state.restaurant.menu_items
        if self.current_screen is OrderScreen.DELIVERY:
            return state.delivery_time is not None
        return False

    def allowed_events(self) -> list[FlowEvent]:
        return [event for (screen, event) in TRANSITIONS if screen is self.current_screen]

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ScreenListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, event: FlowEvent, payload: Any = None) -> OrderScreen:
        """Apply one event and return the screen the flow lands on."""
        transition = TRANSITIONS.get((self.current_screen, event))
        if transition is None:
            raise InvalidTransitionError(f"{event.name} is not allowed on {self.current_screen.name}")
        if transition.needs_payload and payload is None:
            raise InvalidTransitionError(f"{event.name} requires a selection")

        previous = self.current_screen
        if transition.stack_op == _PUSH:
            self._back_stack.append(transition.target)
        elif transition.stack_op == _POP:
            self._back_stack.pop()
        elif transition.stack_op == _POP_TO_START:
            del self._back_stack[1:]

        if transition.effect is not None:
            transition.effect(self.controller, payload)

        if self.current_screen is not previous:
            self._notify()
        return self.current_screen

    def select_restaurant(self, restaurant: Restaurant) -> OrderScreen:
        return self.dispatch(FlowEvent.RESTAURANT_SELECTED, restaurant)

    def select_meal(self, item: MenuItem) -> OrderScreen:
        return self.dispatch(FlowEvent.MEAL_SELECTED, item)

    def select_delivery_time(self, time: str) -> OrderScreen:
        return self.dispatch(FlowEvent.TIME_SELECTED, time)

    def next(self) -> OrderScreen:
        return self.dispatch(FlowEvent.NEXT)

    def cancel(self) -> OrderScreen:
        return self.dispatch(FlowEvent.CANCEL)

    def submit(self) -> OrderScreen:
        return self.dispatch(FlowEvent.SUBMIT)

    def navigate_up(self) -> OrderScreen:
        """Pop one step without touching the order. No-op on Start."""
        if not self.can_navigate_back:
            return self.current_screen
        self._back_stack.pop()
        self._notify()
        return self.current_screen

    def _notify(self) -> None:
        screen = self.current_screen
        for listener in list(self._listeners):
            listener(screen)
