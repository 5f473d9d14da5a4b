from decimal import Decimal

import pytest

from buffbites.data import DELIVERY_TIME_OPTIONS, lookup_restaurant
from buffbites.navigation import TRANSITIONS, FlowEvent, InvalidTransitionError, OrderFlow, OrderScreen


@pytest.fixture
def restaurant_a():
    return lookup_restaurant("restaurant_a")


@pytest.fixture
def burger(restaurant_a):
    return next(item for item in restaurant_a.menu_items if item.name == "Burger")


def _flow_at_delivery(restaurant, item):
    flow = OrderFlow()
    flow.select_restaurant(restaurant)
    flow.select_meal(item)
    flow.next()
    return flow


def test_flow_starts_on_start_without_back():
    flow = OrderFlow()
    assert flow.current_screen is OrderScreen.START
    assert flow.back_stack == (OrderScreen.START,)
    assert not flow.can_navigate_back
    assert flow.state.is_empty


def test_only_restaurant_selection_leaves_start():
    flow = OrderFlow()
    assert flow.allowed_events() == [FlowEvent.RESTAURANT_SELECTED]
    for event in (FlowEvent.NEXT, FlowEvent.CANCEL, FlowEvent.SUBMIT):
        with pytest.raises(InvalidTransitionError):
            flow.dispatch(event)
    assert flow.current_screen is OrderScreen.START


def test_selecting_restaurant_opens_meal(restaurant_a):
    flow = OrderFlow()
    assert flow.select_restaurant(restaurant_a) is OrderScreen.MEAL
    assert flow.state.restaurant == restaurant_a
    assert flow.can_navigate_back


def test_cancel_from_meal_resets_and_returns_to_start(restaurant_a, burger):
    flow = OrderFlow()
    flow.select_restaurant(restaurant_a)
    flow.select_meal(burger)

    assert flow.cancel() is OrderScreen.START
    assert flow.back_stack == (OrderScreen.START,)
    assert flow.state.is_empty


def test_cancel_from_delivery_goes_back_and_keeps_order(restaurant_a, burger):
    flow = _flow_at_delivery(restaurant_a, burger)
    flow.select_delivery_time(DELIVERY_TIME_OPTIONS[0])

    assert flow.cancel() is OrderScreen.MEAL
    assert flow.back_stack == (OrderScreen.START, OrderScreen.MEAL)
    assert flow.state.restaurant == restaurant_a
    assert flow.state.menu_item == burger
    assert flow.state.delivery_time == DELIVERY_TIME_OPTIONS[0]


@pytest.mark.parametrize("finish", ["submit", "cancel"])
def test_summary_submit_and_cancel_reset_to_start(restaurant_a, burger, finish):
    flow = _flow_at_delivery(restaurant_a, burger)
    flow.select_delivery_time(DELIVERY_TIME_OPTIONS[2])
    flow.next()
    assert flow.current_screen is OrderScreen.SUMMARY

    assert getattr(flow, finish)() is OrderScreen.START
    assert flow.back_stack == (OrderScreen.START,)
    assert flow.state.is_empty


def test_navigate_up_pops_without_reset(restaurant_a, burger):
    flow = _flow_at_delivery(restaurant_a, burger)
    assert flow.navigate_up() is OrderScreen.MEAL
    assert flow.navigate_up() is OrderScreen.START
    assert flow.state.menu_item == burger
    assert flow.navigate_up() is OrderScreen.START


def test_can_advance_requires_a_selection(restaurant_a, burger):
    flow = OrderFlow()
    assert not flow.can_advance
    flow.select_restaurant(restaurant_a)
    assert not flow.can_advance
    flow.select_meal(burger)
    assert flow.can_advance
    flow.next()
    assert not flow.can_advance
    flow.select_delivery_time(DELIVERY_TIME_OPTIONS[1])
    assert flow.can_advance


def test_invalid_event_has_no_side_effects(restaurant_a, burger):
    flow = OrderFlow()
    flow.select_restaurant(restaurant_a)
    flow.select_meal(burger)
    before = flow.state

    with pytest.raises(InvalidTransitionError):
        flow.submit()
    with pytest.raises(InvalidTransitionError):
        flow.select_delivery_time(DELIVERY_TIME_OPTIONS[0])
    assert flow.current_screen is OrderScreen.MEAL
    assert flow.state == before


def test_selection_event_requires_payload(restaurant_a):
    flow = OrderFlow()
    with pytest.raises(InvalidTransitionError):
        flow.dispatch(FlowEvent.RESTAURANT_SELECTED)
    assert flow.current_screen is OrderScreen.START


def test_screen_listeners_only_fire_on_screen_change(restaurant_a, burger):
    flow = OrderFlow()
    seen = []
    flow.subscribe(seen.append)

    flow.select_restaurant(restaurant_a)
    flow.select_meal(burger)
    flow.next()
    flow.cancel()
    assert seen == [OrderScreen.MEAL, OrderScreen.DELIVERY, OrderScreen.MEAL]


def test_end_to_end_order(restaurant_a, burger):
    flow = OrderFlow()
    flow.select_restaurant(restaurant_a)
    flow.select_meal(burger)
    assert flow.state.subtotal == Decimal("8.00")
    flow.next()
    flow.select_delivery_time("Mon Sep 18 7:00 PM")
    assert flow.next() is OrderScreen.SUMMARY
    assert flow.state.delivery_time == "Mon Sep 18 7:00 PM"

    assert flow.submit() is OrderScreen.START
    assert flow.state.is_empty


def test_meal_from_previous_restaurant_does_not_allow_next(restaurant_a, burger):
    flow = OrderFlow()
    flow.select_restaurant(restaurant_a)
    flow.select_meal(burger)
    flow.navigate_up()

    flow.select_restaurant(lookup_restaurant("restaurant_b"))
    assert flow.state.menu_item == burger
    assert not flow.can_advance

    pizza = lookup_restaurant("restaurant_b").menu_items[0]
    flow.select_meal(pizza)
    assert flow.can_advance
    assert flow.state.subtotal == pizza.price


def test_raising_order_listener_leaves_stack_and_order_consistent(restaurant_a, burger):
    flow = OrderFlow()
    flow.select_restaurant(restaurant_a)
    flow.select_meal(burger)

    def fail_on_reset(state):
        if state.is_empty:
            raise RuntimeError("listener failed")

    flow.controller.subscribe(fail_on_reset)
    with pytest.raises(RuntimeError):
        flow.cancel()
    assert flow.current_screen is OrderScreen.START
    assert flow.back_stack == (OrderScreen.START,)
    assert flow.state.is_empty


def test_transition_effects_are_callables():
    for transition in TRANSITIONS.values():
        assert transition.effect is None or callable(transition.effect)
    assert TRANSITIONS[(OrderScreen.DELIVERY, FlowEvent.CANCEL)].effect is None
