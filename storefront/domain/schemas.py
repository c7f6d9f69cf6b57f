# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, computed_field, field_validator
from pydantic.alias_generators import to_camel
from typing import List
from decimal import Decimal
from datetime import datetime

from storefront.domain.order_status import OrderStatus
from storefront.utils.settings import DEFAULT_ORDER_EMAIL


class CamelModel(BaseModel):
    """JSON na zewnatrz w camelCase, w kodzie snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------- cart

class CartItem(CamelModel):
    """Pozycja koszyka, jedna na product_id."""

    product_id: str = Field(..., min_length=1)
    name: str | None = None
    brand: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0)
    quantity: int
    image_url: str | None = None


class ItemIn(CartItem):
    """Schema dla dodawania produktu do koszyka."""

    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")


class QuantityIn(CamelModel):
    # brak pola = 0 = usuniecie pozycji
    quantity: int = 0


class Cart(CamelModel):
    customer_id: str
    items: List[CartItem] = Field(default_factory=list)

    @computed_field(alias="total")
    @property
    def total(self) -> Decimal:
        return sum((i.price * i.quantity for i in self.items), Decimal("0.00"))

    @computed_field(alias="itemCount")
    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    def find_item(self, product_id: str) -> CartItem | None:
        return next((i for i in self.items if i.product_id == product_id), None)


# ---------------------------------------------------------------- orders

class OrderItem(CamelModel):
    product_id: str
    name: str | None = None
    brand: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0)
    quantity: int = Field(..., gt=0)
    image_url: str | None = None


class OrderCreate(CamelModel):
    """Schema dla tworzenia zamowienia. Status od klienta jest ignorowany."""

    customer_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, max_length=255)
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    postal_code: str | None = None
    items: List[OrderItem] = Field(default_factory=list)
    # kolumny Numeric(10, 2), wiecej miejsc po przecinku odrzucamy zamiast zaokraglac
    subtotal: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    shipping_cost: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    total: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    status: str | None = None


class OrderOut(CamelModel):
    """Schema dla zamowienia (response)."""

    id: str
    checkout_id: str | None = None
    customer_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    postal_code: str | None = None
    items: List[OrderItem] = Field(default_factory=list)
    subtotal: Decimal | None = None
    shipping_cost: Decimal | None = None
    total: Decimal | None = None
    status: OrderStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StatusUpdateIn(CamelModel):
    status: str | None = None


# ---------------------------------------------------------------- events

class CheckoutEvent(CamelModel):
    """
    Event z kolejki checkout.events. Wszystkie pola opcjonalne,
    brak customerId nie jest tu walidowany (wywali sie dopiero na zapisie).
    """

    event: str | None = None
    customer_id: str | None = None
    email: str = DEFAULT_ORDER_EMAIL
    # "42.555" nie zmiesci sie w Numeric(10, 2) bez zaokraglenia, taki event odpada
    total: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    order_id: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @field_validator("email", mode="before")
    @classmethod
    def _default_email(cls, value):
        return DEFAULT_ORDER_EMAIL if value in (None, "") else value
