"""
Unit tests for API error types and messages
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.leasify.client.errors import (
    ApiError,
    LOGIN_MESSAGES,
    SERVER_ERROR_MESSAGE,
    describe_error,
    login_error_message,
)


class TestApiError:
    """Tests for ApiError"""

    def test_attributes(self):
        error = ApiError(422, "Invalid", {"name": ["required"]})
        assert error.status == 422
        assert error.message == "Invalid"
        assert error.field_errors == {"name": ["required"]}
        assert str(error) == "Invalid"

    def test_first_field_error_skips_empty_lists(self):
        error = ApiError(422, "Invalid", {"name": [], "months": ["must be at least 1", "other"]})
        assert error.first_field_error() == "must be at least 1"

    def test_first_field_error_without_errors(self):
        assert ApiError(400, "Bad").first_field_error() is None
        assert ApiError(400, "Bad", {}).first_field_error() is None


class TestLoginErrorMessage:
    """Tests for login_error_message"""

    @pytest.mark.parametrize("status", [401, 403, 429])
    def test_canned_messages(self, status):
        assert login_error_message(status, "Error", {}) == LOGIN_MESSAGES[status]

    @pytest.mark.parametrize("status", [500, 502, 599])
    def test_server_errors(self, status):
        assert login_error_message(status, "Error", {}) == SERVER_ERROR_MESSAGE

    def test_other_status_uses_reason(self):
        assert login_error_message(404, "Not Found", {}) == "HTTP 404: Not Found"

    def test_server_message_overrides_canned_text(self):
        assert login_error_message(401, "Unauthorized", {"message": "Bad credentials"}) == "Bad credentials"

    def test_empty_server_message_is_ignored(self):
        assert login_error_message(429, "Too Many Requests", {"message": ""}) == LOGIN_MESSAGES[429]


class TestDescribeError:
    """Tests for describe_error"""

    def test_field_error_wins(self):
        error = ApiError(422, "The given data was invalid.", {"name": ["The name field is required."]})
        assert describe_error(error) == "The name field is required."

    def test_falls_back_to_message(self):
        assert describe_error(ApiError(500, "Server exploded")) == "Server exploded"

    def test_other_exceptions(self):
        assert describe_error(RuntimeError("boom")) == "An unexpected error occurred"
