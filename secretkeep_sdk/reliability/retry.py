"""
Retry engine with exponential backoff.

Runs a fallible operation until it succeeds, signals a permanent failure,
exhausts its time or attempt budget, or is cancelled:

    IDLE -> ATTEMPTING -> SUCCEEDED | PERMANENTLY_FAILED | EXHAUSTED | CANCELLED

Attempts are strictly sequential. Between attempts the engine asks the
backoff sequence for the next delay, notifies the configured callback and
sleeps, waking early if the cancellation token fires.

Whatever stops the loop, the caller receives either normal completion or a
single StructuredError whose code says why retrying stopped.
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, Protocol, Union

from pydantic import ValidationError

from ..errors import (
    ERR_DATA_INVALID_INPUT,
    ERR_RETRY_CONTEXT_CANCELED,
    ERR_RETRY_MAX_ELAPSED_TIME_REACHED,
    ERR_RETRY_OPERATION_FAILED,
    StructuredError,
)
from ..observability.logging import RetryLogger
from .backoff import STOP, ExponentialBackOff
from .cancellation import CancellationToken
from .options import RetrierConfig, RetrierOption
from .state import RetryOutcome, RetryPhase

logger = RetryLogger("retry")

Operation = Callable[[], Union[Any, Awaitable[Any]]]


class Retrier(Protocol):
    """Interface for retry strategies."""

    async def retry_with_backoff(
        self,
        operation: Operation,
        token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Run ``operation`` until it succeeds or the strategy gives up.

        Args:
            operation: Callable performing one attempt; raising means failure
            token: Optional cancellation token

        Raises:
            StructuredError: Why retrying stopped
        """
        ...


class Permanent(Exception):
    """
    Raised by an operation to stop retrying immediately.

    The wrapped error is what the caller receives, regardless of the
    remaining time or attempt budget.
    """

    def __init__(self, error: BaseException):
        super().__init__(str(error))
        self.error = error


def permanent(error: BaseException) -> Permanent:
    """Mark ``error`` as not retryable: ``raise permanent(err)``."""
    return Permanent(error)


def classify(error: BaseException) -> StructuredError:
    """StructuredErrors pass through; anything else is wrapped as an operation failure."""
    if isinstance(error, StructuredError):
        return error
    return ERR_RETRY_OPERATION_FAILED.wrap(error)


class ExponentialRetrier:
    """
    Retrier using an exponential backoff sequence.

    Every call to ``retry_with_backoff`` gets its own backoff sequence, so one
    retrier can be shared by concurrent call sites.

    Example:
        >>> retrier = ExponentialRetrier(
        ...     with_initial_interval(0.1),
        ...     with_max_interval(5),
        ...     with_notify(lambda err, delay, total: print(f"retrying: {err}")),
        ... )
        >>> await retrier.retry_with_backoff(fetch_secret)
    """

    def __init__(self, *options: RetrierOption):
        config = RetrierConfig()
        try:
            for option in options:
                option(config)
        except ValidationError as e:
            raise ERR_DATA_INVALID_INPUT.wrap(e) from None
        if config.max_attempts < 0:
            raise ERR_DATA_INVALID_INPUT.with_message(
                f"max_attempts must not be negative, got {config.max_attempts}"
            )
        self.config = config

    def new_backoff(self) -> ExponentialBackOff:
        """Create a fresh backoff sequence from the configured policy."""
        return ExponentialBackOff(
            self.config.policy.model_copy(),
            clock=self.config.clock,
            rng=self.config.rng,
        )

    async def retry_with_backoff(
        self,
        operation: Operation,
        token: Optional[CancellationToken] = None,
    ) -> None:
        config = self.config
        backoff = self.new_backoff()
        backoff.reset()
        outcome = RetryOutcome()

        with logger.track_sequence("retry_with_backoff") as meta:
            sequence_id = meta["sequence_id"]

            while True:
                outcome.begin_attempt()
                error = await self._attempt(operation)

                if error is None:
                    outcome.finish(RetryPhase.SUCCEEDED)
                    if outcome.attempt_count > 1:
                        logger.info(
                            "Succeeded after retries",
                            sequence_id=sequence_id,
                            **outcome.to_dict(),
                        )
                    return

                if isinstance(error, Permanent):
                    outcome.record_failure(error.error)
                    outcome.finish(RetryPhase.PERMANENTLY_FAILED)
                    logger.debug("Permanent failure, not retrying", sequence_id=sequence_id)
                    raise classify(error.error)

                outcome.record_failure(error)

                if token is not None and token.cancelled:
                    raise self._stopped(token, error, outcome, sequence_id)

                if config.max_attempts and outcome.attempt_count >= config.max_attempts:
                    outcome.finish(RetryPhase.EXHAUSTED)
                    logger.warning(
                        "Attempt limit reached",
                        sequence_id=sequence_id,
                        **outcome.to_dict(),
                    )
                    raise config.max_attempts_error.wrap(error)

                delay = backoff.next_backoff()
                if delay is STOP:
                    raise self._stopped(token, error, outcome, sequence_id)

                if token is not None and token.done:
                    raise self._stopped(token, error, outcome, sequence_id)

                outcome.add_delay(delay)
                logger.debug(
                    "Attempt failed, retrying",
                    sequence_id=sequence_id,
                    attempt=outcome.attempt_count,
                    delay_ms=round(delay * 1000, 3),
                    error_type=type(error).__name__,
                )
                self._notify(error, delay, outcome.total_elapsed, sequence_id)

                if token is None:
                    await asyncio.sleep(delay)
                elif await token.wait(delay):
                    raise self._stopped(token, error, outcome, sequence_id)

    async def _attempt(self, operation: Operation) -> Optional[BaseException]:
        """Run one attempt, returning the error it raised (None on success)."""
        try:
            result = operation()
            if inspect.isawaitable(result):
                await result
        except Exception as e:  # noqa: BLE001
            return e
        return None

    def _notify(self, error: BaseException, delay: float, total: float, sequence_id: str):
        if self.config.notify is None:
            return
        try:
            self.config.notify(error, delay, total)
        except Exception as e:  # noqa: BLE001
            logger.error("Notify callback failed", sequence_id=sequence_id, error=e)

    def _stopped(
        self,
        token: Optional[CancellationToken],
        last_error: BaseException,
        outcome: RetryOutcome,
        sequence_id: str,
    ) -> StructuredError:
        """Terminal error when the budget ran out or the token fired."""
        if token is not None and token.cancelled:
            outcome.finish(RetryPhase.CANCELLED)
            logger.info("Retry cancelled", sequence_id=sequence_id, **outcome.to_dict())
            return ERR_RETRY_CONTEXT_CANCELED.wrap(last_error)

        outcome.finish(RetryPhase.EXHAUSTED)
        logger.warning(
            "Maximum elapsed time reached",
            sequence_id=sequence_id,
            **outcome.to_dict(),
        )
        return ERR_RETRY_MAX_ELAPSED_TIME_REACHED.wrap(last_error)
