# storefront/messaging/checkout_consumer.py
from kombu.mixins import ConsumerMixin

from storefront.celery_worker import celery_app, checkout_queue
from storefront.services.checkout_ingestor import CheckoutEventIngestor
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutEventConsumer(ConsumerMixin):
    """
    Petla konsumenta kolejki checkout.events.

    Wiadomosci sa przetwarzane po jednej (prefetch 1) i zawsze ackowane,
    takze gdy obsluga sie nie uda: bez nack, bez redelivery, bez DLQ.
    """

    def __init__(self, connection, ingestor: CheckoutEventIngestor, queue=checkout_queue):
        self.connection = connection
        self.ingestor = ingestor
        self.queue = queue

    def get_consumers(self, Consumer, channel):
        # on_message zamiast callbacks: dostajemy surowe body, kombu nic nie dekoduje
        return [
            Consumer(
                queues=[self.queue],
                on_message=self.on_message,
                prefetch_count=1,
            )
        ]

    def on_message(self, message):
        try:
            self.ingestor.handle(message.body)
        finally:
            message.ack()

    def on_connection_error(self, exc, interval):
        logger.warning(f"Broker connection error: {exc}, retrying in {interval}s")


def main():
    logger.info(f"Consuming checkout events from queue {checkout_queue.name}")
    with celery_app.connection_for_read() as conn:
        CheckoutEventConsumer(conn, CheckoutEventIngestor()).run()


if __name__ == "__main__":
    main()
