"""Typed adapter over a pass/fail Retrier."""

import inspect
from typing import Awaitable, Callable, Generic, Optional, TypeVar, Union

from .cancellation import CancellationToken
from .retry import Retrier

T = TypeVar("T")

Handler = Callable[[], Union[T, Awaitable[T]]]


class TypedRetrier(Generic[T]):
    """
    Retry operations that produce a value.

    The wrapped retrier only sees whether each attempt raised; the value of
    the most recent attempt is kept in a slot and returned on success.

    Example:
        >>> retrier = TypedRetrier[str](ExponentialRetrier())
        >>> secret = await retrier.retry_with_backoff(fetch_secret)
    """

    def __init__(self, retrier: Retrier):
        self.retrier = retrier

    async def retry_with_backoff(
        self,
        operation: Handler[T],
        token: Optional[CancellationToken] = None,
    ) -> T:
        """
        Run ``operation`` with the wrapped retrier's strategy.

        Returns:
            The value returned by the successful attempt

        Raises:
            StructuredError: Why retrying stopped
        """
        slot: Optional[T] = None

        async def attempt():
            nonlocal slot
            result = operation()
            if inspect.isawaitable(result):
                result = await result
            slot = result

        await self.retrier.retry_with_backoff(attempt, token)
        return slot
