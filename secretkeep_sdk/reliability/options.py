"""
Functional options for the retry engine.

An option is a callable that mutates a RetrierConfig. Options are applied in
the order given, so a later option overrides an earlier one; presets rely on
this to install their defaults first and let callers override them.

Example:
    >>> retrier = ExponentialRetrier(
    ...     with_initial_interval(0.1),
    ...     with_max_elapsed_time(60),
    ...     with_notify(lambda err, delay, total: print(err)),
    ... )
"""

import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..config.models import BackoffPolicy
from ..config.settings import load_retry_settings
from ..errors import ERR_RETRY_MAX_ATTEMPTS_REACHED, StructuredError

# (error, delay, total delay) for every failed attempt that will be retried
NotifyFn = Callable[[BaseException, float, float], None]


@dataclass
class RetrierConfig:
    """Resolved configuration of an ExponentialRetrier."""
    policy: BackoffPolicy = field(default_factory=load_retry_settings)
    notify: Optional[NotifyFn] = None
    max_attempts: int = 0  # 0 = bounded by time only
    max_attempts_error: StructuredError = ERR_RETRY_MAX_ATTEMPTS_REACHED
    clock: Callable[[], float] = time.monotonic
    rng: Callable[[], float] = random.random


RetrierOption = Callable[[RetrierConfig], None]


def with_initial_interval(seconds: float) -> RetrierOption:
    """Set the delay before the first retry."""
    def apply(config: RetrierConfig):
        config.policy.initial_interval = seconds
    return apply


def with_max_interval(seconds: float) -> RetrierOption:
    """Cap any single delay. Intervals never exceed this, whatever the multiplier."""
    def apply(config: RetrierConfig):
        config.policy.max_interval = seconds
    return apply


def with_max_elapsed_time(seconds: float) -> RetrierOption:
    """Cap the total retry time. 0 retries until success or cancellation."""
    def apply(config: RetrierConfig):
        config.policy.max_elapsed_time = seconds
    return apply


def with_multiplier(multiplier: float) -> RetrierOption:
    """Set the growth factor between successive delays."""
    def apply(config: RetrierConfig):
        config.policy.multiplier = multiplier
    return apply


def with_randomization_factor(factor: float) -> RetrierOption:
    """Set the jitter fraction. 0 gives deterministic delays."""
    def apply(config: RetrierConfig):
        config.policy.randomization_factor = factor
    return apply


def with_policy(policy: BackoffPolicy) -> RetrierOption:
    """Replace the whole backoff policy (a copy is taken)."""
    def apply(config: RetrierConfig):
        config.policy = policy.model_copy()
    return apply


def with_backoff_options(*options: RetrierOption) -> RetrierOption:
    """Group several options into one."""
    def apply(config: RetrierConfig):
        for option in options:
            option(config)
    return apply


def with_notify(fn: Optional[NotifyFn]) -> RetrierOption:
    """
    Set the callback invoked after each failed attempt that will be retried.

    The callback runs synchronously, in attempt order, on the retry loop.
    """
    def apply(config: RetrierConfig):
        config.notify = fn
    return apply


def with_attempt_limit(
    max_attempts: int,
    error: StructuredError = ERR_RETRY_MAX_ATTEMPTS_REACHED,
) -> RetrierOption:
    """Stop after ``max_attempts`` attempts, raising ``error`` (0 removes the limit)."""
    def apply(config: RetrierConfig):
        config.max_attempts = max_attempts
        config.max_attempts_error = error
    return apply


def with_clock(clock: Callable[[], float]) -> RetrierOption:
    def apply(config: RetrierConfig):
        config.clock = clock
    return apply


def with_rng(rng: Callable[[], float]) -> RetrierOption:
    def apply(config: RetrierConfig):
        config.rng = rng
    return apply
