# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.domain.schemas import Cart, ItemIn, QuantityIn
from storefront.repos.cart_repo import CartRepo
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service() -> CartService:
    return CartService(CartRepo())


@router.get("/{customer_id}", response_model=Cart)
def get_cart(customer_id: str, svc: CartService = Depends(get_service)):
    return svc.get_cart(customer_id)


@router.post("/{customer_id}/items", response_model=Cart)
def add_item(customer_id: str, payload: ItemIn, svc: CartService = Depends(get_service)):
    try:
        return svc.add_item(customer_id, payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{customer_id}/items/{product_id}", response_model=Cart)
def update_item(
    customer_id: str,
    product_id: str,
    payload: QuantityIn | None = None,
    svc: CartService = Depends(get_service),
):
    quantity = payload.quantity if payload else 0
    return svc.update_item(customer_id, product_id, quantity)


@router.delete("/{customer_id}/items/{product_id}", response_model=Cart)
def remove_item(customer_id: str, product_id: str, svc: CartService = Depends(get_service)):
    return svc.remove_item(customer_id, product_id)


@router.delete("/{customer_id}", status_code=204)
def clear_cart(customer_id: str, svc: CartService = Depends(get_service)):
    svc.clear_cart(customer_id)
    return Response(status_code=204)
