"""
gighub/core/locks.py

Per-gig serialization of the rating aggregate recompute.

When REDIS_HOST is configured, an async Redis lock keyed by gig id is held
for the duration of the recompute so that several API workers cannot
interleave. Without Redis, an in-process asyncio.Lock per gig id is used.
In both cases the recompute itself also takes a row lock on the gig.
"""

import asyncio
import logging
import uuid
import weakref
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import redis.asyncio as redis

from gighub.core.config import settings

# ---------------------------------------------------
# Logger Configuration
# ---------------------------------------------------
logger = logging.getLogger(__name__)

# ---------------------------------------------------
# Redis Client Initialization
# ---------------------------------------------------
redis_client: redis.Redis | None = None  # type: ignore[type-arg]

if settings.redis_url:
    try:
        redis_client = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            decode_responses=True,
        )
        logger.info(
            f"[REDIS ASYNC] Initialized async Redis client for {settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}"
        )
    except redis.RedisError as e:
        logger.error(f"[REDIS ASYNC] Initialization failed: {e}")
        redis_client = None

# Prefix for all lock keys
LOCK_PREFIX = "gig_rating_lock:"
LOCK_TIMEOUT_SECONDS = 10
LOCK_BLOCKING_TIMEOUT_SECONDS = 5

_local_locks: "weakref.WeakValueDictionary[uuid.UUID, asyncio.Lock]" = weakref.WeakValueDictionary()


def _local_lock(gig_id: uuid.UUID) -> asyncio.Lock:
    lock = _local_locks.get(gig_id)
    if lock is None:
        lock = asyncio.Lock()
        _local_locks[gig_id] = lock
    return lock


@asynccontextmanager
async def gig_lock(gig_id: uuid.UUID) -> AsyncIterator[None]:
    """
    Holds an exclusive lock for one gig id.

    Falls back to the in-process lock if Redis is unreachable.
    """
    if redis_client is not None:
        lock = redis_client.lock(
            f"{LOCK_PREFIX}{gig_id}",
            timeout=LOCK_TIMEOUT_SECONDS,
            blocking_timeout=LOCK_BLOCKING_TIMEOUT_SECONDS,
        )
        try:
            acquired = await lock.acquire()
        except redis.RedisError as e:
            logger.error(f"[REDIS ASYNC] Lock unavailable for gig {gig_id}: {e}")
            acquired = False
        else:
            if acquired:
                try:
                    yield
                finally:
                    try:
                        await lock.release()
                    except redis.RedisError as e:
                        logger.warning(f"[REDIS ASYNC] Lock release failed for gig {gig_id}: {e}")
                return
            logger.warning(f"[REDIS ASYNC] Timed out waiting for lock on gig {gig_id}")

    async with _local_lock(gig_id):
        yield
