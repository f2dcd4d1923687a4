"""
Process-wide registry mapping error codes to sentinel errors.

Codes are the only error information that crosses the network. The registry
turns a received code back into the rich StructuredError declared for it, and
degrades unknown codes (for example ones introduced by a newer server) to the
general-failure sentinel instead of failing.
"""

import threading
from typing import Dict, List, Optional

from .base import GENERAL_FAILURE_CODE, ErrorCode, StructuredError


class _ReadWriteLock:
    """Many concurrent readers or one writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    def acquire_read(self):
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True

    def release_write(self):
        with self._cond:
            self._writing = False
            self._cond.notify_all()


class ErrorRegistry:
    """
    Thread-safe lookup table from ErrorCode to a canonical StructuredError.

    All mutation goes through ``register`` and all reads through
    ``from_code``. Registering an existing code overwrites it (last wins), so
    each code must be declared exactly once.
    """

    def __init__(
        self,
        fallback_code: str = GENERAL_FAILURE_CODE,
        fallback_message: str = "general failure",
    ):
        self._errors: Dict[ErrorCode, StructuredError] = {}
        self._lock = _ReadWriteLock()
        self._fallback = self.register(fallback_code, fallback_message)

    @property
    def fallback(self) -> StructuredError:
        """Sentinel returned for unknown codes."""
        return self._fallback

    def register(
        self,
        code: str,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> StructuredError:
        """
        Create a frozen sentinel and add it to the registry.

        Args:
            code: Error code string
            message: Human-readable message
            cause: Optional wrapped error (normally None for sentinels)

        Returns:
            StructuredError: The registered sentinel
        """
        err = StructuredError(ErrorCode(code), message, cause).freeze()
        self._lock.acquire_write()
        try:
            self._errors[err.code] = err
        finally:
            self._lock.release_write()
        return err

    def from_code(self, code: Optional[str]) -> StructuredError:
        """
        Map an error code to its sentinel.

        Never raises: an unknown or empty code yields the fallback sentinel.
        """
        if not code:
            return self._fallback
        self._lock.acquire_read()
        try:
            err = self._errors.get(ErrorCode(code))
        finally:
            self._lock.release_read()
        if err is None:
            return self._fallback
        return err

    def codes(self) -> List[ErrorCode]:
        """Sorted snapshot of the registered codes."""
        self._lock.acquire_read()
        try:
            return sorted(self._errors)
        finally:
            self._lock.release_read()

    def __contains__(self, code: object) -> bool:
        self._lock.acquire_read()
        try:
            return code in self._errors
        finally:
            self._lock.release_read()

    def __len__(self) -> int:
        self._lock.acquire_read()
        try:
            return len(self._errors)
        finally:
            self._lock.release_read()


default_registry = ErrorRegistry()


def register(code: str, message: str, cause: Optional[BaseException] = None) -> StructuredError:
    """Register a sentinel in the default registry."""
    return default_registry.register(code, message, cause)


def from_code(code: Optional[str]) -> StructuredError:
    """Look up a code in the default registry."""
    return default_registry.from_code(code)
