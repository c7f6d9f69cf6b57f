# storefront/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError


#tenacity retry, tylko bledy transportu (WatchError obsluguje sam redis.transaction)
def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type((RedisConnectionError, RedisTimeoutError)),
    )
