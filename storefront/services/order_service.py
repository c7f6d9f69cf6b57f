# storefront/services/order_service.py
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.errors import OrderNotFoundError, IllegalStatusTransitionError
from storefront.domain.order_status import OrderStatus, can_transition
from storefront.domain.schemas import OrderCreate
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Cykl zycia zamowienia: tworzenie (API albo event z checkoutu)
    i przejscia statusow wg tabeli w domain.order_status.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    #query
    def get_order(self, order_id: str) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise OrderNotFoundError(order_id)
        return order

    def list_orders(self, status: str | OrderStatus | None = None) -> List[OrderModel]:
        if status is None:
            return self.repo.list_orders()
        return self.repo.list_by_status(OrderStatus.parse(status).value)

    def list_orders_by_customer(self, customer_id: str) -> List[OrderModel]:
        return self.repo.list_by_customer(customer_id)

    #commands
    def create_order(self, payload: OrderCreate) -> OrderModel:
        """
        Use Case: zamowienie z API. Status od klienta ignorujemy, zawsze PENDING.
        """
        now = datetime.now(timezone.utc)
        order = OrderModel(
            customer_id=payload.customer_id,
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            address=payload.address,
            city=payload.city,
            country=payload.country,
            postal_code=payload.postal_code,
            # snapshot pozycji, nie odswiezamy z katalogu
            items=[i.model_dump(mode="json", by_alias=True) for i in payload.items],
            subtotal=payload.subtotal,
            shipping_cost=payload.shipping_cost,
            total=payload.total,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        created = self.repo.create_order(order)
        logger.info(f"Created order {created.id} for customer {created.customer_id}")
        return created

    def update_status(self, order_id: str, status: str | OrderStatus) -> OrderModel:
        target = OrderStatus.parse(status)
        order = self.get_order(order_id)
        current = OrderStatus(order.status)

        if not can_transition(current, target):
            raise IllegalStatusTransitionError(current.value, target.value)

        order.status = target.value
        order.updated_at = datetime.now(timezone.utc)
        updated = self.repo.save(order)

        logger.info(f"Order {order_id} status updated {current.value} -> {target.value}")
        return updated

    def process_checkout_event(self, order: OrderModel) -> OrderModel:
        """
        Use Case: zamowienie z eventu checkout, od razu CONFIRMED (bez PENDING).

        Idempotencja po checkout_id: ten sam event drugi raz zwraca
        istniejace zamowienie. Eventy bez checkout_id zawsze tworza nowe.
        """
        if order.checkout_id:
            existing = self.repo.get_by_checkout_id(order.checkout_id)
            if existing:
                logger.info(
                    f"Checkout {order.checkout_id} already materialized as order {existing.id}, skipping"
                )
                return existing

        now = datetime.now(timezone.utc)
        order.status = OrderStatus.CONFIRMED.value
        order.created_at = now
        order.updated_at = now
        if order.items is None:
            order.items = []

        try:
            saved = self.repo.create_order(order)
        except IntegrityError:
            # rownolegla redelivery tego samego eventu wygrala wyscig na unikalnym checkout_id
            self.repo.rollback()
            existing = self.repo.get_by_checkout_id(order.checkout_id) if order.checkout_id else None
            if existing is None:
                raise
            logger.info(f"Checkout {order.checkout_id} inserted concurrently as order {existing.id}")
            return existing

        logger.info(f"Processed checkout event -> order {saved.id} CONFIRMED")
        return saved
