# baglemonster/services/lock_service.py
import uuid
from contextlib import contextmanager

import redis

from baglemonster.domain.exceptions import ConcurrencyError
from baglemonster.utils.retry import redis_retry
from baglemonster.utils.settings import CART_LOCK_TTL_SECONDS, REDIS_URL
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje lua atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec request nigdy nie zwolni locka ktory nalezy do innego requestu


def cart_lock_key(cart_id: int) -> str:
    return f"cart:{cart_id}:lock"


def user_cart_lock_key(user_id: int) -> str:
    return f"user:{user_id}:cart:lock"


class LockService:
    """
    -blokada koszyka na czas jednej operacji
    -zwalnianie locka tylko przez wlasciciela tokenu
    -atomowosc przy pomocy lua
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def acquire(self, key: str, token: str, ttl: int = CART_LOCK_TTL_SECONDS) -> bool:
        logger.info(f"Acquire lock {key}")
        #SET cart:1:lock "<token>" NX EX 10
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True,  #tylko jesli klucz nie istnieje
                ex=ttl,  #wygasa sam, nawet gdy proces padnie
            )
        )

    @redis_retry()
    def release(self, key: str, token: str) -> bool:
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @contextmanager
    def hold(self, key: str, ttl: int = CART_LOCK_TTL_SECONDS):
        token = uuid.uuid4().hex
        if not self.acquire(key, token, ttl):
            raise ConcurrencyError("Zasób jest właśnie modyfikowany przez inną operację")
        try:
            yield token
        finally:
            self.release(key, token)
