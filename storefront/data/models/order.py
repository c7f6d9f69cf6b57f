# storefront/data/models/order.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, Numeric, JSON

from storefront.data.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # klucz idempotencji z eventu checkout (orderId), unikalny
    checkout_id = Column(String(64), unique=True, nullable=True, index=True)

    customer_id = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=False)

    first_name = Column(String(100))
    last_name = Column(String(100))
    address = Column(Text)
    city = Column(String(100))
    country = Column(String(100))
    postal_code = Column(String(20))

    # snapshot pozycji z momentu zamowienia, ceny jako stringi
    items = Column(JSON, nullable=False, default=list)

    subtotal = Column(Numeric(10, 2))
    shipping_cost = Column(Numeric(10, 2))
    total = Column(Numeric(10, 2))

    status = Column(String(20), nullable=False, default="PENDING", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
