# storefront/celery_worker.py
from celery import Celery
from kombu import Exchange, Queue

from storefront.utils.settings import (
    RABBITMQ_URL,
    CHECKOUT_EXCHANGE,
    CHECKOUT_QUEUE,
    CHECKOUT_ROUTING_KEY,
)

celery_app = Celery(
    "storefront",
    broker=RABBITMQ_URL,
)

checkout_exchange = Exchange(CHECKOUT_EXCHANGE, type="topic", durable=True)
checkout_queue = Queue(
    CHECKOUT_QUEUE,
    exchange=checkout_exchange,
    routing_key=CHECKOUT_ROUTING_KEY,
    durable=True,
)

# checkout.events publikuje serwis checkout (surowy JSON, nie protokol celery),
# konsumuje go messaging.checkout_consumer na polaczeniu brokera z tej aplikacji
celery_app.conf.task_queues = (checkout_queue,)
celery_app.conf.broker_connection_retry_on_startup = True
celery_app.conf.timezone = "UTC"
