"""
Exponential backoff sequence.

Computes successive retry delays from a BackoffPolicy:

    current    = min(initial_interval, max_interval) at the start
    randomized = current * (1 ± randomization_factor)
    current    = min(current * multiplier, max_interval)

The sequence stops (``next_backoff`` returns None) once the elapsed time plus
the next delay would exceed ``max_elapsed_time``. A sequence is owned by a
single retry loop and is not thread-safe.
"""

import random
import time
from typing import Callable, Optional

from ..config.models import BackoffPolicy

STOP = None


class ExponentialBackOff:
    """Stateful delay generator for one retry sequence."""

    def __init__(
        self,
        policy: BackoffPolicy,
        clock: Callable[[], float] = time.monotonic,
        rng: Callable[[], float] = random.random,
    ):
        self.policy = policy
        self._clock = clock
        self._rng = rng
        self.current_interval = self._starting_interval()
        self.start_time = clock()

    def reset(self):
        """Restart the sequence from the initial interval."""
        self.current_interval = self._starting_interval()
        self.start_time = self._clock()

    def elapsed(self) -> float:
        """Seconds since the sequence was (re)started."""
        return self._clock() - self.start_time

    def next_backoff(self) -> Optional[float]:
        """
        Return the next delay in seconds, or STOP (None) when exhausted.
        """
        elapsed = self.elapsed()
        delay = self._randomized_interval(self.current_interval)
        self._increment_current_interval()

        max_elapsed = self.policy.max_elapsed_time
        if max_elapsed and elapsed + delay > max_elapsed:
            return STOP
        return delay

    def _starting_interval(self) -> float:
        return min(self.policy.initial_interval, self.policy.max_interval)

    def _randomized_interval(self, interval: float) -> float:
        factor = self.policy.randomization_factor
        if factor == 0:
            return interval
        delta = factor * interval
        low = interval - delta
        high = interval + delta
        return low + self._rng() * (high - low)

    def _increment_current_interval(self):
        max_interval = self.policy.max_interval
        if self.current_interval >= max_interval / self.policy.multiplier:
            self.current_interval = max_interval
        else:
            self.current_interval *= self.policy.multiplier
