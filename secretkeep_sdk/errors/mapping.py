"""
Error mapping utilities for transport and decoding failures.

Converts exceptions raised by httpx, json and pydantic into StructuredErrors
so that call sites only ever deal with the SDK taxonomy.
"""

import json

import httpx
from pydantic import ValidationError

from .base import StructuredError, iter_chain
from .sentinels import (
    ERR_ACCESS_INVALID_PERMISSION,
    ERR_ACCESS_UNAUTHORIZED,
    ERR_API_BAD_REQUEST,
    ERR_API_NOT_FOUND,
    ERR_API_RESPONSE_CODE_INVALID,
    ERR_API_SERVER_FAULT,
    ERR_DATA_PARSE_FAILURE,
    ERR_DATA_UNMARSHAL_FAILURE,
    ERR_ENTITY_EXISTS,
    ERR_GENERAL_FAILURE,
    ERR_NET_PEER_CONNECTION,
    ERR_NET_READING_RESPONSE_BODY,
    ERR_STATE_NOT_ALIVE,
    ERR_STATE_NOT_READY,
)


class ErrorMapper:
    """Maps foreign exceptions to StructuredErrors."""

    STATUS_CODE_ERRORS = {
        400: ERR_API_BAD_REQUEST,
        401: ERR_ACCESS_UNAUTHORIZED,
        403: ERR_ACCESS_INVALID_PERMISSION,
        404: ERR_API_NOT_FOUND,
        409: ERR_ENTITY_EXISTS,
    }

    # Codes worth another attempt
    RETRYABLE_CODES = frozenset({
        ERR_NET_PEER_CONNECTION.code,
        ERR_NET_READING_RESPONSE_BODY.code,
        ERR_API_SERVER_FAULT.code,
        ERR_STATE_NOT_READY.code,
        ERR_STATE_NOT_ALIVE.code,
    })

    @staticmethod
    def from_status_code(status_code: int) -> StructuredError:
        """
        Return the sentinel for an HTTP status code.

        Args:
            status_code: HTTP response status

        Returns:
            StructuredError: Matching sentinel, ``ERR_API_SERVER_FAULT`` for
            5xx and ``ERR_API_RESPONSE_CODE_INVALID`` for anything unexpected
        """
        if status_code in ErrorMapper.STATUS_CODE_ERRORS:
            return ErrorMapper.STATUS_CODE_ERRORS[status_code]
        if 500 <= status_code < 600:
            return ERR_API_SERVER_FAULT
        return ERR_API_RESPONSE_CODE_INVALID

    @staticmethod
    def map_exception(error: BaseException) -> StructuredError:
        """
        Convert an exception into a StructuredError.

        StructuredErrors are returned unchanged; everything else is wrapped
        under the closest sentinel so the original stays in the chain.
        """
        if isinstance(error, StructuredError):
            return error

        if isinstance(error, (httpx.TimeoutException, httpx.ConnectError)):
            return ERR_NET_PEER_CONNECTION.wrap(error)
        if isinstance(error, (httpx.ReadError, httpx.RemoteProtocolError)):
            return ERR_NET_READING_RESPONSE_BODY.wrap(error)
        if isinstance(error, httpx.HTTPStatusError):
            return ErrorMapper.from_status_code(error.response.status_code).wrap(error)
        if isinstance(error, json.JSONDecodeError):
            return ERR_DATA_UNMARSHAL_FAILURE.wrap(error)
        if isinstance(error, ValidationError):
            return ERR_DATA_PARSE_FAILURE.wrap(error)

        return ERR_GENERAL_FAILURE.wrap(error)

    @staticmethod
    def is_retryable(error: BaseException) -> bool:
        """
        Determine if an error is worth retrying.

        Args:
            error: The exception to check

        Returns:
            bool: True for transport faults, server faults and not-ready states
        """
        for link in iter_chain(error):
            if not isinstance(link, StructuredError):
                link = ErrorMapper.map_exception(link)
            if link.code in ErrorMapper.RETRYABLE_CODES:
                return True
        return False
