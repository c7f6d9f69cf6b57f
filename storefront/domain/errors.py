# storefront/domain/errors.py


class OrderNotFoundError(ValueError):
    def __init__(self, order_id: str):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class InvalidOrderStatusError(ValueError):
    def __init__(self, value):
        super().__init__(f"Unknown order status: {value!r}")
        self.value = value


class IllegalStatusTransitionError(ValueError):
    def __init__(self, current, target):
        super().__init__(f"Cannot transition from {current} to {target}")
        self.current = current
        self.target = target
