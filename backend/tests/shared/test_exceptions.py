"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    ShareError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
)


class TestShareError:
    def test_share_error_message(self):
        """ShareError should store message."""
        error = ShareError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_share_error_default_code(self):
        """ShareError should default code to class name."""
        error = ShareError("Test error")
        assert error.code == "ShareError"

    def test_share_error_custom_code(self):
        error = ShareError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_share_error_default_details(self):
        error = ShareError("Test error")
        assert error.details == {}

    def test_to_dict_carries_message_as_error(self):
        """Responses put the human-readable message under ``error``."""
        error = ShareError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {"error": "Test error", "code": "TEST_ERROR"}

    def test_default_status(self):
        assert ShareError("x").status_code == 500


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error_class,status",
        [
            (NotFoundError, 404),
            (ValidationError, 422),
            (AuthenticationError, 401),
            (AuthorizationError, 401),
            (ConflictError, 422),
        ],
    )
    def test_status_code(self, error_class, status):
        error = error_class("problem")
        assert isinstance(error, ShareError)
        assert error.status_code == status


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="google")
        assert error.service == "google"
        assert error.status_code == 502

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="google",
            details={"status_code": 500}
        )
        assert error.details == {"status_code": 500, "service": "google"}
