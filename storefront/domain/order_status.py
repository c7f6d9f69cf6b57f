# storefront/domain/order_status.py
from enum import Enum

from storefront.domain.errors import InvalidOrderStatusError


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value) -> "OrderStatus":
        """Token statusu bez wzgledu na wielkosc liter, np. "shipped"."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidOrderStatusError(value)
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidOrderStatusError(value) from None


_ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # terminal
    OrderStatus.CANCELLED: set(),  # terminal
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in _ALLOWED_TRANSITIONS.get(current, set())


def is_terminal(status: OrderStatus) -> bool:
    return not _ALLOWED_TRANSITIONS.get(status)
