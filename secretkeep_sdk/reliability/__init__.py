"""Reliability layer: backoff, cancellation and the retry engine.

This layer handles:
- Exponential backoff sequences
- Cooperative cancellation of retry loops
- The retry engine and its functional options
- A typed wrapper for operations that produce a value
- Retry presets (bounded by time, by attempts, or unbounded)
"""

from .backoff import STOP, ExponentialBackOff
from .cancellation import CancellationToken
from .options import (
    NotifyFn,
    RetrierConfig,
    RetrierOption,
    with_attempt_limit,
    with_backoff_options,
    with_clock,
    with_initial_interval,
    with_max_elapsed_time,
    with_max_interval,
    with_multiplier,
    with_notify,
    with_policy,
    with_randomization_factor,
    with_rng,
)
from .presets import do, forever, with_max_attempts
from .retry import ExponentialRetrier, Permanent, Retrier, classify, permanent
from .state import RetryOutcome, RetryPhase
from .typed import Handler, TypedRetrier

__all__ = [
    "STOP",
    "ExponentialBackOff",
    "CancellationToken",
    "NotifyFn",
    "RetrierConfig",
    "RetrierOption",
    "with_attempt_limit",
    "with_backoff_options",
    "with_clock",
    "with_initial_interval",
    "with_max_elapsed_time",
    "with_max_interval",
    "with_multiplier",
    "with_notify",
    "with_policy",
    "with_randomization_factor",
    "with_rng",
    "do",
    "forever",
    "with_max_attempts",
    "ExponentialRetrier",
    "Permanent",
    "Retrier",
    "classify",
    "permanent",
    "RetryOutcome",
    "RetryPhase",
    "Handler",
    "TypedRetrier",
]
