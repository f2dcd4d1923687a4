"""
Wire representation of errors.

Only the bare error code crosses the network, in the ``err`` field of a
response envelope. The receiving side resolves it through the registry.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import StructuredError, error_code
from .registry import ErrorRegistry, default_registry


class ErrorResponse(BaseModel):
    """Error field of a response envelope."""
    err: Optional[str] = Field(None, description="Error code, empty on success")

    @field_validator("err")
    def strip_code(cls, v):
        if v is None:
            return v
        return v.strip() or None

    def to_error(self, registry: Optional[ErrorRegistry] = None) -> Optional[StructuredError]:
        """
        Resolve the carried code.

        Args:
            registry: Registry to resolve against (defaults to the process registry)

        Returns:
            The registered sentinel, the general-failure sentinel for unknown
            codes, or None when the envelope carries no error
        """
        if self.err is None:
            return None
        return (registry or default_registry).from_code(self.err)

    @classmethod
    def from_error(cls, err: Optional[BaseException]) -> "ErrorResponse":
        """Build the envelope field for ``err`` (empty for None)."""
        if err is None:
            return cls()
        return cls(err=error_code(err))
