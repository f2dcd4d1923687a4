"""Structured errors, the sentinel taxonomy and the code registry.

Import SDK errors as a module for easier code search:

    from secretkeep_sdk import errors as sdk_errors

    raise sdk_errors.ERR_ENTITY_NOT_FOUND.wrap(db_error)

    if sdk_errors.is_error(err, sdk_errors.ERR_ENTITY_NOT_FOUND):
        ...
"""

from .base import (
    GENERAL_FAILURE_CODE,
    ErrorCode,
    StructuredError,
    error_code,
    find_error,
    is_error,
    iter_chain,
    maybe_error,
)
from .registry import ErrorRegistry, default_registry, from_code, register

# Declaring the sentinels populates the default registry
from .sentinels import *  # noqa: F401,F403
from .mapping import ErrorMapper
from .wire import ErrorResponse
