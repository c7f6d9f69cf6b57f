# storefront/utils/logging.py
import logging

from storefront.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.basicConfig(level=LOG_LEVEL, format=_FORMAT)

# kombu i amqp sa bardzo gadatliwe na INFO
logging.getLogger("kombu").setLevel(logging.WARNING)
logging.getLogger("amqp").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
