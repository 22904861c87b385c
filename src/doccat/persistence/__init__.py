"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from doccat.core.config import AppSettings
from doccat.core.logging import get_logger
from doccat.persistence.dynamodb_backend import DynamoDBSessionStore
from doccat.persistence.memory_backend import MemorySessionStore
from doccat.persistence.redis_backend import RedisCacheBackend

LOGGER = get_logger(__name__)


def create_persistence(settings: AppSettings | None = None):
    """Create the wired-up session store from application settings.

    Returns:
        Tuple of (session_store, cache); cache is None unless Redis is enabled.
    """
    if settings is None:
        settings = AppSettings()

    if settings.persistence == "memory":
        LOGGER.info("Using in-memory session store")
        return MemorySessionStore(), None

    cache = RedisCacheBackend.from_config(settings.redis) if settings.redis.enabled else None

    session_store = DynamoDBSessionStore(
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
        cache=cache,
        cache_ttl=settings.redis.session_ttl,
    )
    LOGGER.info("Using DynamoDB session store (suffix=%r, cache=%s)",
                settings.dynamodb.table_suffix, cache is not None)
    return session_store, cache
