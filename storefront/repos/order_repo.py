# storefront/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: str) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def get_by_checkout_id(self, checkout_id: str) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).where(OrderModel.checkout_id == checkout_id)
        ).scalar_one_or_none()

    def list_orders(self) -> List[OrderModel]:
        return list(self.db.execute(select(OrderModel)).scalars().all())

    def list_by_customer(self, customer_id: str) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.customer_id == customer_id)
                .order_by(OrderModel.created_at.desc())
            ).scalars().all()
        )

    def list_by_status(self, status: str) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel).where(OrderModel.status == status)
            ).scalars().all()
        )

    def save(self, order: OrderModel) -> OrderModel:
        self.db.commit()
        self.db.refresh(order)
        return order

    def rollback(self):
        self.db.rollback()
