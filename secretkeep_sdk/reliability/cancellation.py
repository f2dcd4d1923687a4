"""
Cancellation token for retry sequences.

A token is the caller's handle on a running retry loop. It fires at most
once, either through an explicit ``cancel()`` or when its optional deadline
passes. The retry engine checks it before every sleep and waits on it during
the sleep, so cancellation latency is bounded by scheduling slop rather than
by the remaining delay. An attempt that is already running is never aborted.

Tokens are bound to the event loop that awaits them; from another thread
use ``loop.call_soon_threadsafe(token.cancel)``.
"""

import asyncio
import time
from typing import Callable, Optional


class CancellationToken:
    """
    Fire-once cancellation signal with an optional deadline.

    Args:
        timeout: Seconds until the token expires on its own (None = never)
        clock: Monotonic clock, injectable for tests
    """

    def __init__(self, timeout: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._deadline = clock() + timeout if timeout is not None else None
        self._cancelled = False
        self._event: Optional[asyncio.Event] = None

    def cancel(self):
        """Fire the token. Later calls have no effect."""
        if self._cancelled:
            return
        self._cancelled = True
        if self._event is not None:
            self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once ``cancel()`` has been called."""
        return self._cancelled

    @property
    def expired(self) -> bool:
        """True once the deadline has passed."""
        return self._deadline is not None and self._clock() >= self._deadline

    @property
    def done(self) -> bool:
        return self._cancelled or self.expired

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, None without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    async def wait(self, timeout: float) -> bool:
        """
        Sleep for up to ``timeout`` seconds, waking early if the token fires.

        Args:
            timeout: Maximum time to wait in seconds

        Returns:
            bool: True if the token was cancelled or expired before the
            timeout elapsed, False if the full timeout passed
        """
        if self.done:
            return True

        limit = timeout
        remaining = self.remaining()
        clipped = remaining is not None and remaining <= timeout
        if clipped:
            limit = remaining

        if self._event is None:
            self._event = asyncio.Event()
        try:
            await asyncio.wait_for(self._event.wait(), timeout=limit)
        except asyncio.TimeoutError:
            return clipped or self.done
        return True
