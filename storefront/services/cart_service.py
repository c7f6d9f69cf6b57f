# storefront/services/cart_service.py
from pydantic import ValidationError

from storefront.domain.schemas import Cart, CartItem
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla koszyka trzymanego w redisie.
    query (get) tylko odczyt, commands (add, update, remove, clear) zapisuja
    caly koszyk z nowym TTL.
    """

    def __init__(self, repo: CartRepo):
        self.repo = repo

    #query - odczyt
    def get_cart(self, customer_id: str) -> Cart:
        return self._decode(customer_id, self.repo.get(customer_id))

    #commands
    def add_item(self, customer_id: str, item: CartItem) -> Cart:
        if item.quantity <= 0:
            raise ValueError("Ilosc musi byc wieksza niz 0")

        def apply(cart: Cart) -> None:
            existing = cart.find_item(item.product_id)
            if existing:
                # merge: tylko ilosc, reszta pol zostaje jak byla zapisana
                existing.quantity += item.quantity
            else:
                cart.items.append(item.model_copy())

        cart = self._mutate(customer_id, apply)
        logger.info(f"Added {item.quantity} x {item.product_id} to cart of {customer_id}")
        return cart

    def update_item(self, customer_id: str, product_id: str, quantity: int) -> Cart:
        def apply(cart: Cart) -> None:
            if quantity <= 0:
                cart.items = [i for i in cart.items if i.product_id != product_id]
                return
            existing = cart.find_item(product_id)
            if existing:
                existing.quantity = quantity

        cart = self._mutate(customer_id, apply)
        logger.info(f"Set quantity of {product_id} to {quantity} in cart of {customer_id}")
        return cart

    def remove_item(self, customer_id: str, product_id: str) -> Cart:
        def apply(cart: Cart) -> None:
            cart.items = [i for i in cart.items if i.product_id != product_id]

        cart = self._mutate(customer_id, apply)
        logger.info(f"Removed {product_id} from cart of {customer_id}")
        return cart

    def clear_cart(self, customer_id: str) -> None:
        # usuwamy klucz, nie zapisujemy pustego koszyka
        self.repo.delete(customer_id)
        logger.info(f"Cleared cart of {customer_id}")

    def _mutate(self, customer_id: str, apply) -> Cart:
        result = {}

        def step(raw: bytes | None) -> str:
            cart = self._decode(customer_id, raw)
            apply(cart)
            result["cart"] = cart
            return cart.model_dump_json(by_alias=True)

        self.repo.mutate(customer_id, step)
        return result["cart"]

    def _decode(self, customer_id: str, raw: str | bytes | None) -> Cart:
        if raw is None:
            return Cart(customer_id=customer_id)
        try:
            cart = Cart.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            # uszkodzona wartosc (tez nie-UTF-8) traktujemy jak brak koszyka, ale zostawiamy slad w logach
            logger.warning(f"Stored cart for {customer_id} could not be decoded, starting empty: {e}")
            return Cart(customer_id=customer_id)
        cart.customer_id = customer_id
        return cart
