# storefront/repos/cart_repo.py
from typing import Callable

import redis

from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL, CART_KEY_PREFIX, CART_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo:
    """
    Koszyki w redisie jako JSON (UTF-8) pod kluczem cart:<customer_id>.
    Kazdy zapis ustawia pelne TTL (SET ... EX), odczyt TTL nie rusza.
    """

    def __init__(
        self,
        client: redis.Redis | None = None,
        url: str | None = None,
        prefix: str = CART_KEY_PREFIX,
        ttl: int = CART_TTL_SECONDS,
    ):
        # bez decode_responses: surowe bajty dekoduje serwis, zepsute UTF-8 to tez "brak koszyka"
        self.redis = client or redis.Redis.from_url(url or REDIS_URL)
        self.prefix = prefix
        self.ttl = ttl

    def key(self, customer_id: str) -> str:
        return f"{self.prefix}{customer_id}"

    @redis_retry()
    def get(self, customer_id: str) -> bytes | None:
        return self.redis.get(self.key(customer_id))

    @redis_retry()
    def save(self, customer_id: str, payload: str) -> None:
        self.redis.set(self.key(customer_id), payload, ex=self.ttl)

    @redis_retry()
    def delete(self, customer_id: str) -> None:
        self.redis.delete(self.key(customer_id))

    def mutate(self, customer_id: str, apply: Callable[[bytes | None], str]) -> str:
        """
        Atomowe read-modify-write (optimistic locking na WATCH).

        apply dostaje aktualna wartosc (albo None) i zwraca nowa.
        Jesli ktos inny zapisze klucz miedzy GET a EXEC, redis odrzuca
        transakcje (WatchError) i redis.transaction powtarza calosc,
        wiec apply musi byc czysta funkcja.

        Bez tenacity: EXEC moze sie wykonac mimo utraconej odpowiedzi,
        ponowienie dodaloby zmiane drugi raz. Blad transportu idzie do wolajacego.
        """
        key = self.key(customer_id)

        def _txn(pipe):
            current = pipe.get(key)
            payload = apply(current)
            pipe.multi()
            pipe.set(key, payload, ex=self.ttl)
            return payload

        return self.redis.transaction(_txn, key, value_from_callable=True)
