"""Logging and metrics for the reliability layer."""

from .logging import RetryLogger
from .metrics import RetryMetrics, compose_notify

__all__ = [
    "RetryLogger",
    "RetryMetrics",
    "compose_notify",
]
