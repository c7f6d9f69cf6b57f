# storefront/services/checkout_ingestor.py
import json
from decimal import Decimal

from storefront.data.database import SessionLocal
from storefront.data.models.order import OrderModel
from storefront.domain.schemas import CheckoutEvent
from storefront.services.order_service import OrderService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_CREATED = "ORDER_CREATED"


class CheckoutEventIngestor:
    """
    Obsluga jednej wiadomosci z checkout.events.

    Nie ma komu zglosic bledu, wiec wszystko co pojdzie nie tak jest
    logowane i wiadomosc uznajemy za skonsumowana (brak retry).
    """

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def handle(self, message: str | bytes) -> OrderModel | None:
        db = self.session_factory()
        try:
            logger.info(f"Received checkout event: {message!r}")

            # najpierw generyczny dokument, float jako Decimal zeby total byl dokladny
            document = json.loads(message, parse_float=Decimal)
            if not isinstance(document, dict):
                logger.warning(f"Checkout event is not a JSON object, dropping: {message!r}")
                return None

            event_type = document.get("event")
            if event_type != ORDER_CREATED:
                logger.warning(f"Unknown event type: {event_type}")
                return None

            event = CheckoutEvent.model_validate(document)
            candidate = OrderModel(
                customer_id=event.customer_id,
                email=event.email,
                total=event.total,
                checkout_id=event.order_id,
                items=[],
            )

            return OrderService(db).process_checkout_event(candidate)

        except Exception as e:
            logger.exception(f"Failed to process checkout event: {e}")
            db.rollback()
            return None

        finally:
            db.close()
