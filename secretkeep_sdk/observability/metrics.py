"""Retry metrics collected through the notify hook."""

from typing import Callable, Dict, Optional

from ..errors import error_code


class RetryMetrics:
    """Tracks retry metrics for observability."""

    def __init__(self):
        self.failed_attempts: Dict[str, int] = {}
        self.successes: int = 0
        self.failures: Dict[str, int] = {}
        self.total_retry_delay: float = 0.0

    def record_failed_attempt(self, error: BaseException, delay: float, total: float):
        """Record a retried failure. Matches the notify callback signature."""
        code = error_code(error)
        self.failed_attempts[code] = self.failed_attempts.get(code, 0) + 1
        self.total_retry_delay += delay

    def record_result(self, error: Optional[BaseException] = None):
        """Record how a sequence ended (None for success)."""
        if error is None:
            self.successes += 1
            return
        code = error_code(error)
        self.failures[code] = self.failures.get(code, 0) + 1

    def get_success_rate(self) -> float:
        """Fraction of finished sequences that succeeded."""
        total = self.successes + sum(self.failures.values())
        return self.successes / total if total > 0 else 0.0

    def reset(self):
        self.__init__()


def compose_notify(*callbacks: Optional[Callable[[BaseException, float, float], None]]):
    """Fan one notification out to several callbacks, in order."""
    active = [cb for cb in callbacks if cb is not None]

    def notify(error: BaseException, delay: float, total: float):
        for callback in active:
            callback(error, delay, total)
    return notify
