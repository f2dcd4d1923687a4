"""Unit tests for StructuredError and error chain helpers."""

import pickle

import pytest

from secretkeep_sdk import errors as sdk_errors
from secretkeep_sdk.errors import (
    ErrorCode,
    StructuredError,
    error_code,
    find_error,
    is_error,
    iter_chain,
    maybe_error,
)


class TestStructuredError:
    """Test identity, formatting and copying of structured errors."""

    def test_equality_is_by_code(self):
        """Errors with the same code are equal whatever their message."""
        a = StructuredError(ErrorCode("x_code"), "first message")
        b = StructuredError(ErrorCode("x_code"), "second message")

        assert a == b
        assert hash(a) == hash(b)
        assert a != StructuredError(ErrorCode("y_code"), "first message")

    def test_not_equal_to_foreign_exception(self):
        assert StructuredError(ErrorCode("x_code"), "boom") != ValueError("boom")

    def test_str_formats_code_message_and_cause(self):
        err = sdk_errors.ERR_ENTITY_NOT_FOUND.wrap(ValueError("missing row"))

        assert str(err) == "[entity_not_found] entity not found: missing row"
        assert str(sdk_errors.ERR_ENTITY_NOT_FOUND) == "[entity_not_found] entity not found"

    def test_sentinels_are_frozen(self):
        """Shared sentinels reject mutation."""
        with pytest.raises(AttributeError):
            sdk_errors.ERR_ENTITY_NOT_FOUND.message = "changed"
        with pytest.raises(AttributeError):
            sdk_errors.ERR_ENTITY_NOT_FOUND.cause = ValueError("x")

        assert sdk_errors.ERR_ENTITY_NOT_FOUND.message == "entity not found"

    def test_clone_is_independent(self):
        """Mutating a clone leaves the sentinel untouched."""
        clone = sdk_errors.ERR_ENTITY_NOT_FOUND.clone()
        clone.message = "secret db/creds not found"

        assert not clone.frozen
        assert clone == sdk_errors.ERR_ENTITY_NOT_FOUND
        assert clone is not sdk_errors.ERR_ENTITY_NOT_FOUND
        assert sdk_errors.ERR_ENTITY_NOT_FOUND.message == "entity not found"

    def test_with_message_keeps_code(self):
        err = sdk_errors.ERR_DATA_INVALID_INPUT.with_message("path must not be empty")

        assert err.code == "data_invalid_input"
        assert err.message == "path must not be empty"
        assert sdk_errors.ERR_DATA_INVALID_INPUT.message == "invalid input"

    def test_wrap_sets_cause(self):
        cause = OSError("connection reset")
        err = sdk_errors.ERR_NET_PEER_CONNECTION.wrap(cause)

        assert err.cause is cause
        assert err.__cause__ is cause
        assert err.unwrap() is cause
        assert sdk_errors.ERR_NET_PEER_CONNECTION.cause is None

    def test_pickle_preserves_code_and_cause(self):
        err = sdk_errors.ERR_API_SERVER_FAULT.wrap(ValueError("upstream"))

        restored = pickle.loads(pickle.dumps(err))

        assert restored == err
        assert restored.message == "server fault"
        assert isinstance(restored.cause, ValueError)
        assert not restored.frozen


class TestErrorChain:
    """Test chain traversal across wrapped errors."""

    def test_is_error_finds_wrapped_code(self):
        inner = sdk_errors.ERR_NET_PEER_CONNECTION.wrap(OSError("reset"))
        outer = sdk_errors.ERR_API_POST_FAILED.wrap(inner)

        assert is_error(outer, sdk_errors.ERR_API_POST_FAILED)
        assert is_error(outer, sdk_errors.ERR_NET_PEER_CONNECTION)
        assert not is_error(outer, sdk_errors.ERR_ENTITY_NOT_FOUND)

    def test_is_error_matches_foreign_cause_by_identity(self):
        cause = OSError("reset")
        outer = sdk_errors.ERR_API_POST_FAILED.wrap(cause)

        assert is_error(outer, cause)
        assert not is_error(outer, OSError("reset"))

    def test_is_error_follows_raise_from(self):
        """Python exception chaining is traversed too."""
        with pytest.raises(RuntimeError) as exc_info:
            try:
                raise sdk_errors.ERR_STATE_NOT_READY.clone()
            except StructuredError as e:
                raise RuntimeError("boom") from e

        assert is_error(exc_info.value, sdk_errors.ERR_STATE_NOT_READY)
        assert error_code(exc_info.value) == "state_not_ready"

    def test_received_code_matches_sentinel(self):
        """An error rebuilt from a bare code equals the declared sentinel."""
        received = StructuredError(ErrorCode("entity_not_found"), "remote text")

        assert is_error(received, sdk_errors.ERR_ENTITY_NOT_FOUND)
        assert received.matches(sdk_errors.ERR_ENTITY_NOT_FOUND)

    def test_is_error_with_none(self):
        assert is_error(None, None)
        assert not is_error(None, sdk_errors.ERR_ENTITY_NOT_FOUND)
        assert not is_error(sdk_errors.ERR_ENTITY_NOT_FOUND.clone(), None)

    def test_find_error_by_type(self):
        cause = OSError("reset")
        outer = sdk_errors.ERR_API_POST_FAILED.wrap(sdk_errors.ERR_NET_PEER_CONNECTION.wrap(cause))

        assert find_error(outer, OSError) is cause
        assert find_error(outer) is outer
        assert find_error(outer, KeyError) is None

    def test_error_code_defaults_to_general_failure(self):
        assert error_code(ValueError("x")) == "gen_general_failure"
        assert error_code(None) == "gen_general_failure"

    def test_iter_chain_stops_on_cycle(self):
        first = StructuredError(ErrorCode("first"), "first")
        second = StructuredError(ErrorCode("second"), "second", first)
        first.cause = second

        assert [e.code for e in iter_chain(first)] == ["first", "second"]

    def test_maybe_error(self):
        assert maybe_error(None) == ""
        assert maybe_error(ValueError("bad value")) == "bad value"
