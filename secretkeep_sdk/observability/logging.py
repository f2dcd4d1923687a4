"""
Structured logging utility for the reliability layer.

Provides a consistent logging interface for retry sequences, with standard
bracketed fields such as component, sequence_id and attempt.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional


class RetryLogger:
    """Structured logger for reliability components."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "retry", "presets")
        """
        self.component = component
        self.logger = logging.getLogger(f"secretkeep_sdk.reliability.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, sequence_id: Optional[str] = None, **kwargs):
        self.logger.debug(self._format_message(message, sequence_id=sequence_id, **kwargs))

    def info(self, message: str, sequence_id: Optional[str] = None, **kwargs):
        self.logger.info(self._format_message(message, sequence_id=sequence_id, **kwargs))

    def warning(self, message: str, sequence_id: Optional[str] = None, **kwargs):
        self.logger.warning(self._format_message(message, sequence_id=sequence_id, **kwargs))

    def error(self, message: str, sequence_id: Optional[str] = None,
              error: Optional[BaseException] = None, **kwargs):
        """Log error message, adding the error type and text when given."""
        if error is not None:
            kwargs["error_type"] = type(error).__name__
            kwargs["error_msg"] = str(error)

        self.logger.error(self._format_message(message, sequence_id=sequence_id, **kwargs))

    @contextmanager
    def track_sequence(self, name: str, sequence_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """
        Context manager timing a retry sequence and logging how it ended.

        Args:
            name: What is being retried (e.g., "retry_with_backoff")
            sequence_id: Optional identifier (generated if not provided)

        Yields:
            Dict with sequence metadata including sequence_id
        """
        if sequence_id is None:
            sequence_id = str(uuid.uuid4())[:8]

        start_time = time.monotonic()
        self.debug(f"Starting {name}", sequence_id=sequence_id)

        metadata = {
            "sequence_id": sequence_id,
            "name": name,
            "start_time": start_time,
        }

        try:
            yield metadata

            duration = time.monotonic() - start_time
            self.debug(
                f"Completed {name}",
                sequence_id=sequence_id,
                duration_ms=int(duration * 1000),
            )

        except Exception as e:
            duration = time.monotonic() - start_time
            self.debug(
                f"Failed {name}",
                sequence_id=sequence_id,
                duration_ms=int(duration * 1000),
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            raise

    def notify_fn(self, level: int = logging.WARNING) -> Callable[[BaseException, float, float], None]:
        """
        Build a notify callback that logs each failed attempt.

        Example:
            >>> retrier = ExponentialRetrier(with_notify(RetryLogger("vault").notify_fn()))
        """
        def notify(error: BaseException, delay: float, total: float):
            self.logger.log(
                level,
                self._format_message(
                    "Attempt failed, retrying",
                    error=str(error),
                    delay_ms=int(delay * 1000),
                    total_delay_ms=int(total * 1000),
                ),
            )
        return notify
