# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import (
    OrderNotFoundError,
    InvalidOrderStatusError,
    IllegalStatusTransitionError,
)
from storefront.domain.schemas import OrderCreate, OrderOut, StatusUpdateIn
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


@router.get("", response_model=List[OrderOut])
def list_orders(
    status: str | None = Query(default=None),
    svc: OrderService = Depends(get_service),
):
    try:
        return [OrderOut.model_validate(o) for o in svc.list_orders(status)]
    except InvalidOrderStatusError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/customer/{customer_id}", response_model=List[OrderOut])
def list_orders_by_customer(customer_id: str, svc: OrderService = Depends(get_service)):
    return [OrderOut.model_validate(o) for o in svc.list_orders_by_customer(customer_id)]


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, svc: OrderService = Depends(get_service)):
    try:
        return OrderOut.model_validate(svc.get_order(order_id))
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_service)):
    """
    Tworzy zamowienie ze statusem PENDING (status z body jest ignorowany).
    """
    return OrderOut.model_validate(svc.create_order(payload))


@router.patch("/{order_id}/status", response_model=OrderOut)
def update_status(order_id: str, payload: StatusUpdateIn, svc: OrderService = Depends(get_service)):
    try:
        return OrderOut.model_validate(svc.update_status(order_id, payload.status))
    except InvalidOrderStatusError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IllegalStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
