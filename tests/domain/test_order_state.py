"""Unit tests for the purchase order lifecycle state machine."""

import pytest

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.order_state import (
    TRANSITIONS,
    OrderEvent,
    OrderState,
    OrderStatus,
)

# The full lifecycle, written out independently of TRANSITIONS.
EXPECTED = {
    (OrderStatus.DRAFT, OrderEvent.SUBMIT): OrderStatus.SUBMITTED,
    (OrderStatus.SUBMITTED, OrderEvent.APPROVE): OrderStatus.APPROVED,
    (OrderStatus.APPROVED, OrderEvent.SHIP): OrderStatus.SHIPPED,
    (OrderStatus.SHIPPED, OrderEvent.COMPLETE): OrderStatus.COMPLETED,
    (OrderStatus.DRAFT, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.SUBMITTED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.APPROVED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.SHIPPED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
}

ALL_PAIRS = [(status, event) for status in OrderStatus for event in OrderEvent]

NAMED = {
    OrderEvent.SUBMIT: OrderState.to_submitted,
    OrderEvent.APPROVE: OrderState.to_approved,
    OrderEvent.SHIP: OrderState.to_shipped,
    OrderEvent.COMPLETE: OrderState.to_completed,
    OrderEvent.CANCEL: OrderState.to_cancelled,
}


class TestConstruction:

    def test_defaults_to_draft(self):
        assert OrderState().value is OrderStatus.DRAFT

    def test_accepts_status_value_string(self):
        assert OrderState("Shipped").value is OrderStatus.SHIPPED

    @pytest.mark.parametrize("value", ["Pending", "draft", "", None])
    def test_unknown_value_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid purchase order state"):
            OrderState(value)

    def test_equality_by_value(self):
        assert OrderState("Approved") == OrderState(OrderStatus.APPROVED)
        assert OrderState() != OrderState(OrderStatus.CANCELLED)


class TestTransitionTable:

    def test_table_matches_lifecycle(self):
        assert TRANSITIONS == EXPECTED

    @pytest.mark.parametrize("status, event", ALL_PAIRS)
    def test_every_status_event_pair(self, status, event):
        state = OrderState(status)
        if (status, event) in EXPECTED:
            assert state.transition(event) == OrderState(EXPECTED[(status, event)])
        else:
            with pytest.raises(ValidationError, match="Cannot transition from"):
                state.transition(event)

    @pytest.mark.parametrize("status, event", ALL_PAIRS)
    def test_named_operations_agree_with_table(self, status, event):
        state = OrderState(status)
        operation = NAMED[event]
        if (status, event) in EXPECTED:
            assert operation(state).value is EXPECTED[(status, event)]
        else:
            with pytest.raises(ValidationError):
                operation(state)

    def test_transition_does_not_mutate(self):
        state = OrderState()
        new_state = state.to_submitted()
        assert state.value is OrderStatus.DRAFT
        assert new_state.value is OrderStatus.SUBMITTED
        assert new_state is not state

    def test_error_message_names_both_states(self):
        with pytest.raises(
            ValidationError, match="Cannot transition from Draft to Approved"
        ):
            OrderState().to_approved()

    def test_cancel_completed_rejected(self):
        with pytest.raises(
            ValidationError, match="Cannot transition from Completed to Cancelled"
        ):
            OrderState(OrderStatus.COMPLETED).to_cancelled()

    def test_cancel_cancelled_rejected(self):
        with pytest.raises(ValidationError, match="from Cancelled to Cancelled"):
            OrderState(OrderStatus.CANCELLED).to_cancelled()


class TestQueries:

    def test_is_draft(self):
        assert OrderState().is_draft
        assert not OrderState(OrderStatus.SUBMITTED).is_draft

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_is_terminal(self, status):
        expected = status in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)
        assert OrderState(status).is_terminal is expected

    @pytest.mark.parametrize("status", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
    def test_terminal_states_allow_nothing(self, status):
        assert OrderState(status).allowed_events() == []

    def test_allowed_events_from_draft(self):
        assert set(OrderState().allowed_events()) == {
            OrderEvent.SUBMIT,
            OrderEvent.CANCEL,
        }

    def test_str(self):
        assert str(OrderState(OrderStatus.SHIPPED)) == "Shipped"
