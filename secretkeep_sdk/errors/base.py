"""
Structured error type for the SDK.

Every failure the SDK reports is a StructuredError: a stable, serializable
code, a human-readable message and an optional wrapped cause. Identity is
defined by the code alone, so an error received over the wire as a bare code
string compares equal to the sentinel declared in this package.

Usage patterns:
    1. Raise sentinels through ``wrap``/``clone``/``with_message``, never directly
    2. Compare with ``is_error`` (or ``err.matches``), never with ``is``
    3. Put call-site context in the message of a cloned instance
"""

from typing import Iterator, NewType, Optional, Type, TypeVar

ErrorCode = NewType("ErrorCode", str)

GENERAL_FAILURE_CODE = ErrorCode("gen_general_failure")

_GUARDED_FIELDS = frozenset({"code", "message", "cause"})

E = TypeVar("E", bound=BaseException)


class StructuredError(Exception):
    """
    Error identified by a stable code.

    Attributes:
        code: Error code used for equality and wire transport
        message: Human-readable message
        cause: Wrapped underlying error, if any (mirrored into ``__cause__``)
    """

    def __init__(self, code: ErrorCode, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.cause = cause

    def __setattr__(self, name, value):
        if name in _GUARDED_FIELDS and self.__dict__.get("_frozen", False):
            raise AttributeError(
                f"cannot modify '{name}' of shared error '{self.code}'; clone() it first"
            )
        super().__setattr__(name, value)
        if name == "cause":
            self.__cause__ = value

    def __str__(self) -> str:
        if self.cause is not None:
            return f"[{self.code}] {self.message}: {self.cause}"
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"StructuredError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, StructuredError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.cause))

    @property
    def frozen(self) -> bool:
        """Whether this instance is a shared, read-only sentinel."""
        return self.__dict__.get("_frozen", False)

    def freeze(self) -> "StructuredError":
        """Mark this instance read-only. Used by the registry for sentinels."""
        self.__dict__["_frozen"] = True
        return self

    def wrap(self, cause: Optional[BaseException]) -> "StructuredError":
        """Return a new error with the same code and message wrapping ``cause``."""
        return StructuredError(self.code, self.message, cause)

    def clone(self) -> "StructuredError":
        """Return a mutable shallow copy."""
        return StructuredError(self.code, self.message, self.cause)

    def with_message(self, message: str) -> "StructuredError":
        """Return a copy carrying ``message`` instead of the sentinel text."""
        return StructuredError(self.code, message, self.cause)

    def unwrap(self) -> Optional[BaseException]:
        return self.cause

    def matches(self, target: BaseException) -> bool:
        """Check whether this error's chain contains ``target``'s code."""
        return is_error(self, target)


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield ``err`` followed by every error it wraps."""
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if isinstance(err, StructuredError):
            err = err.cause
        else:
            err = err.__cause__


def find_error(err: Optional[BaseException], cls: Type[E] = StructuredError) -> Optional[E]:
    """Return the first error in the chain that is an instance of ``cls``."""
    for link in iter_chain(err):
        if isinstance(link, cls):
            return link
    return None


def is_error(err: Optional[BaseException], target: Optional[BaseException]) -> bool:
    """
    Report whether ``err``'s chain contains ``target``.

    StructuredErrors match by code: if ``target`` (or the first StructuredError
    in its chain) carries a code, any StructuredError in ``err``'s chain with
    the same code is a match. Other targets match by identity.

    Args:
        err: Error to inspect
        target: Error to look for

    Returns:
        bool: True if the chain contains the target
    """
    if err is None or target is None:
        return err is target
    structured_target = find_error(target, StructuredError)
    for link in iter_chain(err):
        if link is target:
            return True
        if (
            structured_target is not None
            and isinstance(link, StructuredError)
            and link.code == structured_target.code
        ):
            return True
    return False


def error_code(err: Optional[BaseException]) -> ErrorCode:
    """Return the code of the first StructuredError in the chain."""
    structured = find_error(err, StructuredError)
    if structured is None:
        return GENERAL_FAILURE_CODE
    return structured.code


def maybe_error(err: Optional[BaseException]) -> str:
    """Return ``str(err)``, or an empty string when there is no error."""
    if err is not None:
        return str(err)
    return ""
