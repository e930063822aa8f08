"""
Unit tests for the custom exception hierarchy.

Verifies inheritance chains, attribute assignment, and message formatting
for all exception classes in app.core.exceptions.

Version: 1.0.0
"""
import pytest

from app.core.exceptions import (
    AuthenticationError,
    CheckoutNotAllowedError,
    ConnectionTimeoutError,
    DesignNotFoundError,
    ExternalAPIError,
    InvalidStateTransitionError,
    NonRetryableError,
    OrderNotFoundError,
    RetryableError,
    SignConfiguratorException,
    ValidationError,
)


pytestmark = pytest.mark.unit


class TestBaseException:

    def test_is_exception(self):
        assert issubclass(SignConfiguratorException, Exception)

    def test_message_preserved(self):
        assert str(SignConfiguratorException("something went wrong")) == "something went wrong"


class TestRetryableErrors:

    @pytest.mark.parametrize("cls", [ExternalAPIError, ConnectionTimeoutError])
    def test_inheritance(self, cls):
        assert issubclass(cls, RetryableError)
        assert issubclass(cls, SignConfiguratorException)

    def test_external_api_error_attributes(self):
        exc = ExternalAPIError(service="Monday", message="Invalid API token", status_code=401)
        assert exc.service == "Monday"
        assert exc.status_code == 401
        assert exc.reason == "Invalid API token"
        assert str(exc) == "Monday API error: Invalid API token"

    def test_external_api_error_default_status(self):
        assert ExternalAPIError("Routing", "No route").status_code is None


class TestNonRetryableErrors:

    @pytest.mark.parametrize("cls", [
        ValidationError, AuthenticationError, DesignNotFoundError, OrderNotFoundError,
    ])
    def test_inheritance(self, cls):
        assert issubclass(cls, NonRetryableError)
        assert not issubclass(cls, RetryableError)

    def test_invalid_state_transition(self):
        exc = InvalidStateTransitionError("configuring", "submitted")
        assert exc.current == "configuring"
        assert exc.target == "submitted"
        assert "configuring" in str(exc) and "submitted" in str(exc)

    def test_checkout_not_allowed_keeps_reasons(self):
        reasons = ["Order must be confirmed before checkout", "Postal code must consist of 5 digits"]
        exc = CheckoutNotAllowedError(reasons)
        assert exc.reasons == reasons
        assert exc.reasons is not reasons
        assert reasons[1] in str(exc)
