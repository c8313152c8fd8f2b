"""Tests for the wrapped exception schema."""

import json

from azure_repo_state.services.azure.models.schema import (
    GIT_ITEM_NOT_FOUND,
    parse_wrapped_exception,
)


class TestParseWrappedException:
    """Test parse_wrapped_exception."""

    def test_parses_provider_payload(self):
        """Test a full provider payload including a nested exception."""
        payload = {
            "$id": "1",
            "innerException": {"typeKey": "InnerException", "message": "inner"},
            "message": "TF401174: The item '/x' could not be found.",
            "typeName": "Microsoft.TeamFoundation.Git.Server.GitItemNotFoundException",
            "typeKey": GIT_ITEM_NOT_FOUND,
            "errorCode": 0,
            "eventId": 3000,
        }

        result = parse_wrapped_exception(json.dumps(payload))

        assert result is not None
        assert result.type_key == GIT_ITEM_NOT_FOUND
        assert result.event_id == 3000
        assert result.inner_exception.type_key == "InnerException"

    def test_returns_none_for_non_json(self):
        """Test plain text does not raise."""
        assert parse_wrapped_exception("not json at all") is None

    def test_returns_none_without_type_key(self):
        """Test JSON lacking typeKey is not an exception payload."""
        assert parse_wrapped_exception('{"message": "hello"}') is None
