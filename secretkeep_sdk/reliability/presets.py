"""
Ready-made retry policies.

- ``do``: default backoff, bounded by the default elapsed-time ceiling
- ``forever``: no time ceiling; stops on success, permanent failure or cancellation
- ``with_max_attempts``: bounded by a number of attempts instead of time
"""

import inspect
from typing import Awaitable, Callable, Optional, TypeVar, Union

from ..errors import (
    ERR_DATA_INVALID_INPUT,
    ERR_RETRY_MAX_ATTEMPTS_REACHED,
    ERR_RETRY_OPERATION_FAILED,
    StructuredError,
)
from .cancellation import CancellationToken
from .options import RetrierOption, with_attempt_limit, with_max_elapsed_time
from .retry import ExponentialRetrier
from .typed import Handler, TypedRetrier

T = TypeVar("T")


async def do(
    operation: Handler[T],
    *options: RetrierOption,
    token: Optional[CancellationToken] = None,
) -> T:
    """
    Retry a typed operation with default settings.

    Example:
        >>> secret = await do(lambda: client.get_secret("db/password"))
    """
    return await TypedRetrier[T](ExponentialRetrier(*options)).retry_with_backoff(operation, token)


async def forever(
    operation: Handler[T],
    *options: RetrierOption,
    token: Optional[CancellationToken] = None,
) -> T:
    """
    Retry until success, a permanent failure or cancellation.

    Caller options are applied after the unbounded default, so a caller can
    still impose ``with_max_elapsed_time``.
    """
    return await do(operation, with_max_elapsed_time(0), *options, token=token)


async def with_max_attempts(
    max_attempts: int,
    operation: Callable[[], Union[bool, Awaitable[bool]]],
    *options: RetrierOption,
    token: Optional[CancellationToken] = None,
    exhausted_error: StructuredError = ERR_RETRY_MAX_ATTEMPTS_REACHED,
) -> None:
    """
    Retry an operation at most ``max_attempts`` times.

    The operation reports success by returning True. Returning False without
    raising counts as a retryable failure.

    Args:
        max_attempts: Number of attempts, must be positive
        operation: Callable returning True when done
        options: Extra retrier options, applied after the preset defaults
        token: Optional cancellation token
        exhausted_error: Error raised (wrapping the last failure) when the
            attempts run out

    Raises:
        StructuredError: ``ERR_DATA_INVALID_INPUT`` for a non-positive
            ``max_attempts``, ``exhausted_error`` when attempts run out, or
            whatever else stopped the sequence
    """
    if max_attempts <= 0:
        raise ERR_DATA_INVALID_INPUT.with_message(
            f"max_attempts must be positive, got {max_attempts}"
        )

    async def attempt():
        done = operation()
        if inspect.isawaitable(done):
            done = await done
        if not done:
            raise ERR_RETRY_OPERATION_FAILED.with_message("operation not yet successful")

    retrier = ExponentialRetrier(
        with_max_elapsed_time(0),
        *options,
        with_attempt_limit(max_attempts, exhausted_error),
    )
    await retrier.retry_with_backoff(attempt, token)
