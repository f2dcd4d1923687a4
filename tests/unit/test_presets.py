"""Unit tests for the retry presets."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from secretkeep_sdk import errors as sdk_errors
from secretkeep_sdk.config.constants import MAX_ELAPSED_TIME_ENV_VAR
from secretkeep_sdk.errors import StructuredError, is_error
from secretkeep_sdk.reliability import (
    CancellationToken,
    do,
    forever,
    permanent,
    with_initial_interval,
    with_max_interval,
    with_randomization_factor,
    with_max_attempts,
)

STEADY_5MS = [
    with_initial_interval(0.005),
    with_max_interval(0.005),
    with_randomization_factor(0),
]


class TestDo:
    """Test the default preset."""

    @pytest.mark.asyncio
    async def test_returns_value(self, fast_options, flaky_operation):
        operation = flaky_operation(2, sdk_errors.ERR_API_SERVER_FAULT, result="v")

        assert await do(operation, *fast_options) == "v"
        assert operation.call_count == 3

    @pytest.mark.asyncio
    async def test_bounded_by_elapsed_time(self, monkeypatch, failing_operation):
        monkeypatch.setenv(MAX_ELAPSED_TIME_ENV_VAR, "0.01")
        operation = failing_operation(sdk_errors.ERR_NET_PEER_CONNECTION)

        with pytest.raises(StructuredError) as exc_info:
            await do(operation, *STEADY_5MS)

        assert exc_info.value.code == "retry_max_elapsed_time_reached"


class TestForever:
    """Test the unbounded preset."""

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_ignores_default_time_ceiling(self, monkeypatch, flaky_operation):
        monkeypatch.setenv(MAX_ELAPSED_TIME_ENV_VAR, "0.01")
        operation = flaky_operation(10, sdk_errors.ERR_STATE_NOT_READY, result="ready")

        assert await forever(operation, *STEADY_5MS) == "ready"
        assert operation.call_count == 11

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_stopped_by_token(self, failing_operation):
        token = CancellationToken()
        operation = failing_operation(sdk_errors.ERR_NET_PEER_CONNECTION)
        asyncio.get_running_loop().call_later(0.03, token.cancel)

        with pytest.raises(StructuredError) as exc_info:
            await forever(operation, *STEADY_5MS, token=token)

        assert exc_info.value.code == "retry_context_canceled"

    @pytest.mark.asyncio
    async def test_stopped_by_permanent_failure(self, fast_options):
        operation = Mock(side_effect=permanent(sdk_errors.ERR_ACCESS_INVALID_PERMISSION.clone()))

        with pytest.raises(StructuredError) as exc_info:
            await forever(operation, *fast_options)

        assert exc_info.value.code == "access_invalid_permission"
        assert operation.call_count == 1


class TestWithMaxAttempts:
    """Test the attempt-bounded preset."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("max_attempts", [0, -1])
    async def test_rejects_non_positive_attempts(self, max_attempts):
        operation = Mock(return_value=True)

        with pytest.raises(StructuredError) as exc_info:
            await with_max_attempts(max_attempts, operation)

        assert exc_info.value.code == "data_invalid_input"
        operation.assert_not_called()

    @pytest.mark.asyncio
    async def test_false_counts_as_failure(self, fast_options):
        operation = Mock(return_value=False)

        with pytest.raises(StructuredError) as exc_info:
            await with_max_attempts(3, operation, *fast_options)

        assert operation.call_count == 3
        assert exc_info.value.code == "retry_max_attempts_reached"
        assert is_error(exc_info.value, sdk_errors.ERR_RETRY_OPERATION_FAILED)

    @pytest.mark.asyncio
    async def test_success_stops_early(self, fast_options):
        operation = Mock(side_effect=[False, True, True])

        result = await with_max_attempts(3, operation, *fast_options)

        assert result is None
        assert operation.call_count == 2

    @pytest.mark.asyncio
    async def test_raised_errors_count_as_failures(self, fast_options):
        operation = Mock(side_effect=[sdk_errors.ERR_NET_PEER_CONNECTION.clone(), True])

        await with_max_attempts(2, operation, *fast_options)

        assert operation.call_count == 2

    @pytest.mark.asyncio
    async def test_async_operation(self, fast_options):
        operation = AsyncMock(side_effect=[False, False, True])

        await with_max_attempts(5, operation, *fast_options)

        assert operation.await_count == 3

    @pytest.mark.asyncio
    async def test_custom_exhausted_error(self, fast_options):
        operation = Mock(return_value=False)

        with pytest.raises(StructuredError) as exc_info:
            await with_max_attempts(
                2, operation, *fast_options,
                exhausted_error=sdk_errors.ERR_RECOVERY_RETRY_LIMIT_REACHED,
            )

        assert exc_info.value.code == "recovery_retry_limit_reached"

    @pytest.mark.asyncio
    async def test_not_bounded_by_time(self, monkeypatch):
        """The default time ceiling does not cut the attempts short."""
        monkeypatch.setenv(MAX_ELAPSED_TIME_ENV_VAR, "0.001")
        operation = Mock(return_value=False)

        with pytest.raises(StructuredError) as exc_info:
            await with_max_attempts(4, operation, *STEADY_5MS)

        assert operation.call_count == 4
        assert exc_info.value.code == "retry_max_attempts_reached"
