"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NetworkError(ApplicationError):
    """Raised when a request cannot be delivered (connection, timeout, transport)."""

    def __init__(self, message: str = "Network error") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class HttpError(ApplicationError):
    """Raised when the backend answers with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(body or f"HTTP {status_code}", code="HTTP_ERROR")


class InputParseError(ApplicationError):
    """Raised when console input cannot be parsed into the expected type."""

    def __init__(self, text: str, expected: str = "number") -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid {expected}: {text!r}", code="VAL_INVALID_INPUT")


class ConfigurationError(ApplicationError):
    """Raised when a configuration file is missing keys or has wrong types."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIG_ERROR")
