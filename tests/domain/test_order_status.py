"""Testy enuma statusow zamowienia i tabeli przejsc."""

import pytest

from storefront.domain.errors import InvalidOrderStatusError
from storefront.domain.order_status import OrderStatus, can_transition, is_terminal

S = OrderStatus

LEGAL = [
    (S.PENDING, S.CONFIRMED),
    (S.PENDING, S.CANCELLED),
    (S.CONFIRMED, S.PROCESSING),
    (S.CONFIRMED, S.CANCELLED),
    (S.PROCESSING, S.SHIPPED),
    (S.PROCESSING, S.CANCELLED),
    (S.SHIPPED, S.DELIVERED),
]


class TestParse:
    @pytest.mark.parametrize("token", ["shipped", "SHIPPED", " Shipped "])
    def test_case_insensitive(self, token):
        assert OrderStatus.parse(token) is S.SHIPPED

    def test_enum_passes_through(self):
        assert OrderStatus.parse(S.CANCELLED) is S.CANCELLED

    @pytest.mark.parametrize("token", ["teleported", "", None, 3])
    def test_unknown_token_rejected(self, token):
        with pytest.raises(InvalidOrderStatusError):
            OrderStatus.parse(token)


class TestTransitions:
    @pytest.mark.parametrize("current,target", LEGAL)
    def test_legal(self, current, target):
        assert can_transition(current, target)

    @pytest.mark.parametrize(
        "current,target",
        [(c, t) for c in S for t in S if (c, t) not in LEGAL],
    )
    def test_everything_else_is_illegal(self, current, target):
        assert not can_transition(current, target)

    def test_terminal_states(self):
        assert {s for s in S if is_terminal(s)} == {S.DELIVERED, S.CANCELLED}
