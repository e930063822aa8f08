"""
Custom exception hierarchy for the sign configurator backend.

Exceptions are categorized as:
- RetryableError: Transient errors from external collaborators (price board,
  geocoding, routing). Callers degrade to fallback data; nothing retries
  automatically, the next scheduled or manual refresh simply tries again.
- NonRetryableError: Permanent errors that need a different input or a
  configuration fix.
"""
from typing import List, Optional


class SignConfiguratorException(Exception):
    """Base exception for the sign configurator backend."""
    pass


# ============================================
# RETRYABLE ERRORS - transient, degrade to fallback
# ============================================
class RetryableError(SignConfiguratorException):
    """
    Base class for errors where a later attempt might succeed:
    - Network timeouts
    - Temporary service unavailability
    - Malformed responses from a flaky upstream
    """
    pass


class ExternalAPIError(RetryableError):
    """
    Error from an external API (price board, geocoding, routing).

    Typically transient - the external service might recover.
    """
    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        self.service = service
        self.status_code = status_code
        self.reason = message
        super().__init__(f"{service} API error: {message}")


class ConnectionTimeoutError(RetryableError):
    """Connection or timeout error - typically transient."""
    pass


# ============================================
# NON-RETRYABLE ERRORS - need a fix, not a retry
# ============================================
class NonRetryableError(SignConfiguratorException):
    """
    Base class for errors where retrying won't help:
    - Invalid input
    - Unknown designs / orders
    - Missing credentials
    """
    pass


class ValidationError(NonRetryableError):
    """Invalid input data - retrying won't help."""
    pass


class AuthenticationError(NonRetryableError):
    """
    Price board authentication is missing or rejected.

    Needs configuration fix, not retry.
    """
    pass


class DesignNotFoundError(NonRetryableError):
    """Design id is not part of the current catalog."""
    pass


class OrderNotFoundError(NonRetryableError):
    """No persisted order for the given session."""
    pass


class InvalidStateTransitionError(NonRetryableError):
    """Order status change that the order workflow does not allow."""
    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move order from '{current}' to '{target}'")


class CheckoutNotAllowedError(NonRetryableError):
    """Checkout requested without confirmation or with open validation errors."""
    def __init__(self, reasons: List[str]):
        self.reasons = list(reasons)
        super().__init__("Checkout not allowed: " + "; ".join(self.reasons))
