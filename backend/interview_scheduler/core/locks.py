"""Per-interviewer, per-day mutual exclusion for booking admission."""

from __future__ import annotations

import logging
import threading
import time
from contextlib import ExitStack, contextmanager
from datetime import date
from typing import Iterable, Iterator, Optional, Union
from uuid import UUID

import redis
from redis.exceptions import ConnectionError, LockError, RedisError

from interview_scheduler.core.config import settings
from interview_scheduler.core.errors import LockUnavailableError

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None
_redis_checked_at: Optional[float] = None


class _InMemoryLocks:
    """Fallback process-local locks when Redis is unavailable.

    An entry lives only while someone holds or waits for it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # name -> [lock, holders and waiters]
        self._entries: dict[str, list] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    @contextmanager
    def hold(self, name: str, timeout: float) -> Iterator[None]:
        with self._guard:
            entry = self._entries.setdefault(name, [threading.Lock(), 0])
            entry[1] += 1
        try:
            if not entry[0].acquire(timeout=timeout):
                raise LockUnavailableError("Booking is busy, please try again")
            try:
                yield
            finally:
                entry[0].release()
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._entries[name]


_local_locks = _InMemoryLocks()


def _get_redis_client() -> Optional[redis.Redis]:
    """Return the Redis client, or None when Redis is disabled or unreachable.

    A failed connection is retried once REDIS_RETRY_SECONDS have passed.
    """
    global _redis_client, _redis_checked_at

    if _redis_client is not None or not settings.REDIS_URL:
        return _redis_client

    now = time.monotonic()
    if (
        _redis_checked_at is not None
        and now - _redis_checked_at < settings.REDIS_RETRY_SECONDS
    ):
        return None
    _redis_checked_at = now

    try:
        client = redis.Redis.from_url(settings.REDIS_URL, socket_connect_timeout=2)
        client.ping()
        _redis_client = client
        logger.info(f"Booking locks backed by Redis: {settings.REDIS_URL}")
    except (ConnectionError, RedisError) as e:
        logger.warning(f"Failed to connect to Redis for locks: {e}. Using in-process locks.")
        _redis_client = None
    return _redis_client


def reset_lock_backend() -> None:
    """Forget the cached Redis connection (used when settings change)."""
    global _redis_client, _redis_checked_at
    _redis_client = None
    _redis_checked_at = None


def lock_name(interviewer_id: Union[UUID, str], tenant_id: Union[UUID, str], day: date) -> str:
    return f"booking-lock:{tenant_id}:{interviewer_id}:{day.isoformat()}"


@contextmanager
def _day_lock(name: str) -> Iterator[None]:
    client = _get_redis_client()

    if client is None:
        if settings.REDIS_URL:
            logger.warning(f"Redis unavailable, taking process-local lock {name}")
        with _local_locks.hold(name, settings.BOOKING_LOCK_WAIT_SECONDS):
            yield
        return

    redis_lock = client.lock(
        name,
        timeout=settings.BOOKING_LOCK_TIMEOUT_SECONDS,
        blocking_timeout=settings.BOOKING_LOCK_WAIT_SECONDS,
    )
    if not redis_lock.acquire():
        raise LockUnavailableError("Booking is busy, please try again")
    try:
        yield
    finally:
        try:
            redis_lock.release()
        except LockError as e:
            # Lock expired before release; the transaction already finished
            logger.warning(f"Booking lock {name} expired before release: {e}")


@contextmanager
def booking_lock(
    interviewer_id: Union[UUID, str],
    tenant_id: Union[UUID, str],
    days: Iterable[date],
) -> Iterator[None]:
    """Hold the admission locks for every calendar day a booking touches.

    Days are locked in ascending order so two admissions never wait on each other.
    """
    with ExitStack() as stack:
        for day in sorted(set(days)):
            stack.enter_context(_day_lock(lock_name(interviewer_id, tenant_id, day)))
        yield
