"""
Per-sequence retry state.

A RetryOutcome is created by the engine for one ``retry_with_backoff`` call
and discarded when it returns. It is never shared between sequences.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class RetryPhase(str, Enum):
    """States of a retry sequence."""
    IDLE = "idle"
    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    PERMANENTLY_FAILED = "permanently_failed"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self not in (RetryPhase.IDLE, RetryPhase.ATTEMPTING)


@dataclass
class RetryOutcome:
    """Tracks attempts, waiting time and the last error of a sequence."""
    attempt_count: int = 0
    total_elapsed: float = 0.0
    last_error: Optional[BaseException] = None
    phase: RetryPhase = RetryPhase.IDLE
    started_at: float = field(default_factory=time.monotonic)

    def begin_attempt(self):
        if self.phase.terminal:
            raise RuntimeError(f"retry sequence already finished ({self.phase.value})")
        self.phase = RetryPhase.ATTEMPTING
        self.attempt_count += 1

    def record_failure(self, error: BaseException):
        self.last_error = error

    def add_delay(self, delay: float):
        self.total_elapsed += delay

    def finish(self, phase: RetryPhase):
        self.phase = phase

    def get_duration(self) -> float:
        """Wall-clock seconds since the sequence started."""
        return time.monotonic() - self.started_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attempts": self.attempt_count,
            "total_delay": round(self.total_elapsed, 6),
            "phase": self.phase.value,
            "last_error": type(self.last_error).__name__ if self.last_error else None,
            "duration_ms": int(self.get_duration() * 1000),
        }
