"""Unit tests for the wire error envelope."""

from secretkeep_sdk import errors as sdk_errors
from secretkeep_sdk.errors import ErrorRegistry, ErrorResponse


class TestErrorResponse:
    """Test resolving and producing wire error codes."""

    def test_known_code_resolves_to_sentinel(self):
        response = ErrorResponse(err="entity_not_found")

        assert response.to_error() is sdk_errors.ERR_ENTITY_NOT_FOUND

    def test_unknown_code_degrades_to_general_failure(self):
        response = ErrorResponse(err="introduced_in_v9")

        assert response.to_error() is sdk_errors.ERR_GENERAL_FAILURE

    def test_empty_code_means_success(self):
        assert ErrorResponse().to_error() is None
        assert ErrorResponse(err="").to_error() is None
        assert ErrorResponse(err="   ").err is None

    def test_parse_from_json(self):
        response = ErrorResponse.model_validate_json('{"err": " state_not_ready "}')

        assert response.err == "state_not_ready"
        assert response.to_error() is sdk_errors.ERR_STATE_NOT_READY

    def test_custom_registry(self):
        registry = ErrorRegistry()
        sealed = registry.register("vault_sealed", "vault is sealed")

        assert ErrorResponse(err="vault_sealed").to_error(registry) is sealed
        assert ErrorResponse(err="entity_not_found").to_error(registry) is registry.fallback

    def test_from_error_sends_code_only(self):
        err = sdk_errors.ERR_ENTITY_EXISTS.wrap(ValueError("duplicate key"))

        response = ErrorResponse.from_error(err)

        assert response.err == "entity_exists"
        assert response.model_dump() == {"err": "entity_exists"}

    def test_from_error_foreign_and_none(self):
        assert ErrorResponse.from_error(None).err is None
        assert ErrorResponse.from_error(KeyError("x")).err == "gen_general_failure"

    def test_code_survives_transport(self):
        """A code sent by one side matches the sentinel on the other side."""
        sent = sdk_errors.ERR_API_SERVER_FAULT.wrap(RuntimeError("disk full"))
        payload = ErrorResponse.from_error(sent).model_dump_json()

        received = ErrorResponse.model_validate_json(payload).to_error()

        assert sdk_errors.is_error(received, sdk_errors.ERR_API_SERVER_FAULT)
        assert received == sent
