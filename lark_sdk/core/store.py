import abc
import logging
import time
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

# 剩余有效期低于该值（秒）的 token 视为已过期
EXPIRY_MARGIN = 5


class Store(abc.ABC):
    """
    Token 存储抽象

    get 返回 (val, ttl)，ttl 单位为秒；不存在或已过期时返回 ("", 0)。
    实现方需要保证 token 与过期时间的读写是原子的。
    """

    @abc.abstractmethod
    async def get(self, key: str) -> Tuple[str, int]:
        ...

    @abc.abstractmethod
    async def set(self, key: str, val: str, ttl: int) -> None:
        ...


class MemoryStore(Store):
    def __init__(self):
        self._store: Dict[str, Dict] = {}
        logger.debug("MemoryStore initialized")

    async def get(self, key: str) -> Tuple[str, int]:
        item = self._store.get(key)
        if item is None:
            logger.debug("Store miss: key=%s", key)
            return "", 0

        ttl = int(item["expired"] - time.time())
        if ttl >= EXPIRY_MARGIN:
            logger.debug("Store hit: key=%s, ttl=%d", key, ttl)
            return item["val"], ttl

        logger.debug("Store expired: key=%s, ttl=%d", key, ttl)
        self._store.pop(key, None)
        return "", 0

    async def set(self, key: str, val: str, ttl: int) -> None:
        self._store[key] = {"val": val, "ttl": ttl, "expired": time.time() + ttl}
        logger.debug("Store set: key=%s, ttl=%d", key, ttl)

    def clear(self):
        size = len(self._store)
        self._store.clear()
        logger.info("Store cleared: removed %d entries", size)
