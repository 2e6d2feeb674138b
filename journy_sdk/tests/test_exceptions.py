"""
Test suite for SDK exceptions.

Tests:
- Exception hierarchy and inheritance
- Exception initialization and attributes
- Error message formatting
"""

import pytest

from journy_sdk import (
    AuthenticationError,
    InvalidInputError,
    SDKError,
    UnexpectedResponseError,
    UserIdentity,
)


class TestSDKErrorBase:
    """Test base SDKError exception."""

    def test_sdk_error_creation(self):
        """Test SDKError initialization."""
        error = SDKError("Test error message")
        assert error.message == "Test error message"
        assert error.details == {}

    def test_sdk_error_with_details(self):
        """Test SDKError keeps its details."""
        details = {"status_code": 500, "endpoint": "/track"}
        error = SDKError("Server error", details=details)
        assert error.details == details

    def test_sdk_error_string_representation(self):
        """Test SDKError string formatting."""
        assert str(SDKError("Test error")) == "SDKError: Test error"

    def test_sdk_error_inheritance(self):
        """Test SDKError is an Exception."""
        assert isinstance(SDKError("Test"), Exception)


class TestSubclasses:
    """Test the specific exceptions."""

    @pytest.mark.parametrize("exception_class", [
        InvalidInputError,
        AuthenticationError,
        UnexpectedResponseError,
    ])
    def test_inherits_from_sdk_error(self, exception_class):
        """Test every SDK exception derives from SDKError."""
        error = exception_class("message")
        assert isinstance(error, SDKError)
        assert str(error) == f"{exception_class.__name__}: message"

    def test_invalid_input_can_be_caught_as_sdk_error(self):
        """Test invalid input can be caught as SDKError."""
        with pytest.raises(SDKError):
            UserIdentity()

    def test_invalid_input_details(self):
        """Test InvalidInputError carries the rejected fields."""
        with pytest.raises(InvalidInputError) as excinfo:
            UserIdentity(user_id="", email=None)
        assert excinfo.value.details == {"user_id": None, "email": None}

    def test_exceptions_are_not_builtin_shadows(self):
        """Test SDK exceptions do not catch unrelated built-in errors."""
        assert not issubclass(ValueError, SDKError)
        assert not issubclass(InvalidInputError, ValueError)
