"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every command failure is one of these; the CLI shell is the only place
that turns them into exit codes and error output.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when the client configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class RequestConstructionError(ApplicationError):
    """Raised when an outbound request cannot be built."""

    def __init__(self, message: str = "Malformed request") -> None:
        super().__init__(message, code="REQ_MALFORMED")


class TransportError(ApplicationError):
    """Raised when the request could not be delivered or answered."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class ResponseReadError(ApplicationError):
    """Raised when the response body could not be fully read."""

    def __init__(self, message: str = "Could not read response body") -> None:
        super().__init__(message, code="NET_READ_ERROR")


class DecodeError(ApplicationError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str = "Could not decode response") -> None:
        super().__init__(message, code="RES_DECODE_ERROR")


class ServiceError(ApplicationError):
    """Raised when the remote service answers with an error status."""

    def __init__(self, message: str = "Service error", status_code: int = 500) -> None:
        self.status_code = status_code
        super().__init__(message, code="SVC_ERROR_RESPONSE")
