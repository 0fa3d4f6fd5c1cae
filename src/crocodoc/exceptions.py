"""
Custom exceptions for the Crocodoc client.

This module defines the error hierarchy raised by the client: local
validation failures, errors reported by the Crocodoc API, network failures
and configuration problems.
"""

from typing import Any, Optional


class CrocodocError(Exception):
    """
    Base exception for all Crocodoc client errors.

    All custom exceptions in this package inherit from this class
    to allow for easy catching of all client-specific errors.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


def _format_error_message(error_code: str, class_name: str, method: str) -> str:
    return f"[{error_code}] {class_name}.{method}"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CrocodocError):
    """
    Exception raised when configuration is invalid or missing.

    This includes:
    - Missing API token
    - Invalid configuration values
    """

    pass


class ConfigFileError(ConfigurationError):
    """Exception raised when the configuration file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(CrocodocError):
    """
    Exception raised when a call's arguments fail local validation.

    Validation happens before any request is sent, so these errors never
    carry a response.

    Attributes:
        error_code: Machine-readable code (e.g. ``invalid_width``).
        class_name: The client class that rejected the arguments.
        method: The client method that rejected the arguments.
        field: The name of the offending argument.
        value: The offending value.
    """

    def __init__(
        self,
        error_code: str,
        class_name: str,
        method: str,
        field: Optional[str] = None,
        value: Any = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            _format_error_message(error_code, class_name, method), details
        )
        self.error_code = error_code
        self.class_name = class_name
        self.method = method
        self.field = field
        self.value = value


# =============================================================================
# API Errors
# =============================================================================


class APIError(CrocodocError):
    """
    Exception raised when the Crocodoc API reports a failure.

    This includes:
    - An ``error`` member in a JSON response
    - Responses that should be JSON but are not
    - HTTP 4xx/5xx statuses

    Attributes:
        error_code: The error code reported by, or derived from, the response.
        class_name: The component that issued the request.
        method: The resource that was requested.
        status_code: The HTTP status code returned.
        response: The raw response body, when available.
    """

    def __init__(
        self,
        error_code: str,
        class_name: str,
        method: str,
        status_code: Optional[int] = None,
        response: Optional[bytes] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            _format_error_message(error_code, class_name, method), details
        )
        self.error_code = error_code
        self.class_name = class_name
        self.method = method
        self.status_code = status_code
        self.response = response


# =============================================================================
# Network Errors
# =============================================================================


class NetworkError(CrocodocError):
    """
    Exception raised when a request could not be completed.

    This includes:
    - Connection timeouts
    - DNS resolution failures
    - Connection refused errors
    - SSL/TLS errors
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
