"""Redis cache backend implementing ICacheBackend."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import redis

from doccat.core.config import RedisConfig
from doccat.core.exceptions import CacheError
from doccat.core.logging import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")


class RedisCacheBackend:
    """ICacheBackend backed by Redis; every key is namespaced under ``prefix``."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 prefix: str = "doccat:", client: Any = None) -> None:
        self._prefix = prefix
        self._client = client if client is not None else redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    @classmethod
    def from_config(cls, config: RedisConfig) -> RedisCacheBackend:
        return cls(host=config.host, port=config.port, db=config.db)

    def _call(self, op: str, key: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except redis.RedisError as exc:
            LOGGER.error("Redis %s failed for key=%s: %s", op, key, exc)
            raise CacheError(f"Redis {op} failed for key={key!r}: {exc}") from exc

    def get(self, key: str) -> str | None:
        return self._call("GET", key, lambda: self._client.get(self._prefix + key))

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._call("SETEX", key, lambda: self._client.setex(self._prefix + key, ttl, value))

    def delete(self, key: str) -> None:
        self._call("DELETE", key, lambda: self._client.delete(self._prefix + key))
