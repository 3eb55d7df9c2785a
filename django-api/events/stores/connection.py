"""Database connection management.

A ``ConnectionManager`` owns the one connection handle a process keeps for
its lifetime. The first ``acquire()`` starts establishing it; callers that
arrive while that is in flight await the same task instead of opening their
own connection. A failed attempt is reported to every waiter and forgotten,
so the next ``acquire()`` starts over.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectionManager(Generic[T]):
    """Lazily establishes and caches a single connection handle."""

    def __init__(
        self,
        connect: Callable[[], Awaitable[T]],
        close: Callable[[T], Awaitable[None]] | None = None,
    ) -> None:
        self._connect = connect
        self._close = close
        self._handle: T | None = None
        self._pending: asyncio.Task[T] | None = None

    @property
    def is_connected(self) -> bool:
        return self._handle is not None

    async def acquire(self) -> T:
        """Return the cached handle, establishing it on first use."""
        if self._handle is not None:
            return self._handle

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._establish())

        # A cancelled caller must not cancel the attempt other callers share
        return await asyncio.shield(self._pending)

    async def _establish(self) -> T:
        logger.info("Establishing database connection")
        try:
            handle = await self._connect()
            self._handle = handle
        except Exception:
            logger.exception("Database connection failed")
            raise
        finally:
            # Also on cancellation, so a dead task is never handed out
            self._pending = None
        logger.info("Database connection established")
        return handle

    async def close(self) -> None:
        """Close the cached handle, if any, and forget it.

        Django's ASGI handler has no lifespan shutdown event, so nothing in
        the app calls this; owners of the process lifecycle (scripts, tests)
        call it themselves.
        """
        handle, self._handle = self._handle, None
        if handle is not None and self._close is not None:
            await self._close(handle)
