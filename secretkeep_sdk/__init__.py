"""
SecretKeep SDK - error taxonomy and retry engine for secrets-management clients.

This package provides the resilience layer used by every remote call:
- Structured, code-based errors that survive serialization
- A registry resolving wire error codes back to rich errors
- Exponential backoff retries with cancellation and permanent failures
- Retry presets bounded by time, by attempts, or unbounded

Features:
- Code-based error identity with chain traversal
- Environment-configurable backoff defaults
- Notification hooks for logging and metrics
"""

__version__ = "0.1.0"

from .config import BackoffPolicy, load_retry_settings
from .errors import (
    ErrorCode,
    ErrorMapper,
    ErrorRegistry,
    ErrorResponse,
    StructuredError,
    error_code,
    from_code,
    is_error,
)
from .observability import RetryLogger, RetryMetrics, compose_notify
from .reliability import (
    CancellationToken,
    ExponentialRetrier,
    Permanent,
    TypedRetrier,
    do,
    forever,
    permanent,
    with_max_attempts,
)

__all__ = [
    # Errors
    "ErrorCode",
    "StructuredError",
    "ErrorRegistry",
    "ErrorMapper",
    "ErrorResponse",
    "error_code",
    "from_code",
    "is_error",

    # Configuration
    "BackoffPolicy",
    "load_retry_settings",

    # Retry
    "CancellationToken",
    "ExponentialRetrier",
    "TypedRetrier",
    "Permanent",
    "permanent",
    "do",
    "forever",
    "with_max_attempts",

    # Observability
    "RetryLogger",
    "RetryMetrics",
    "compose_notify",
]
