"""
API Error Types

Every non-success HTTP response from the Leasify API is turned into an
ApiError. Transport failures (connection, DNS, timeouts) are left as the
``requests`` exceptions they are.
"""
from typing import Any, Dict, List, Optional

DEFAULT_ERROR_MESSAGE = "An error occurred"

LOGIN_MESSAGES: Dict[int, str] = {
    401: "Login failed. Please check your email and password.",
    403: (
        "Login failed. Your account may not be enabled for the API beta program. "
        "Please contact support for access."
    ),
    429: "Too many login attempts. Please wait a moment before trying again.",
}
SERVER_ERROR_MESSAGE = "Server error. Please try again later."


class ApiError(Exception):
    """
    Non-success response from the Leasify API.

    Attributes:
        status: HTTP status code
        message: Server-supplied message or a canned fallback
        field_errors: Validation messages keyed by field name, if any
    """

    def __init__(
        self,
        status: int,
        message: str,
        field_errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message)
        self.status = status
        self.message = message
        self.field_errors = field_errors

    def first_field_error(self) -> Optional[str]:
        """Return the first message of the first field that has one."""
        if not self.field_errors:
            return None
        for messages in self.field_errors.values():
            if messages:
                return messages[0]
        return None

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, message={self.message!r})"


def login_error_message(status: int, reason: str, body: Dict[str, Any]) -> str:
    """
    Pick the user-facing message for a failed login.

    Args:
        status: HTTP status code
        reason: HTTP reason phrase
        body: Parsed JSON error body ({} when there was none)

    Returns:
        The server message when present, otherwise a canned message for the status
    """
    if body.get("message"):
        return body["message"]
    if status in LOGIN_MESSAGES:
        return LOGIN_MESSAGES[status]
    if status >= 500:
        return SERVER_ERROR_MESSAGE
    return f"HTTP {status}: {reason}"


def describe_error(error: Exception) -> str:
    """
    Message a form should show for a failed call.

    A field-level validation message wins over the general one.
    """
    if isinstance(error, ApiError):
        return error.first_field_error() or error.message
    return "An unexpected error occurred"
