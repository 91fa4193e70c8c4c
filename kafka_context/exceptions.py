"""Custom exception classes for kafka-context."""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    USAGE_ERROR = "USAGE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONNECTIVITY_ERROR = "CONNECTIVITY_ERROR"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


class KafkaContextError(Exception):
    """Base exception class for kafka-context."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Specific error code for the failure
            details: Additional context about the error
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        base_str = self.message

        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base_str += f" ({details_str})"

        if self.cause:
            base_str += f" [caused by: {self.cause}]"

        return base_str


class UsageError(KafkaContextError):
    """Conflicting or missing command arguments."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code=ErrorCode.USAGE_ERROR)


class ValidationError(KafkaContextError):
    """Exception for validation failures."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        cause: Optional[Exception] = None
    ):
        details = {}
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = str(value)

        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            cause=cause
        )


class ConnectivityError(KafkaContextError):
    """Exception for probe and cluster connection failures."""

    def __init__(
        self,
        message: str,
        address: Optional[str] = None,
        bootstrap_servers: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        details = {}
        if address:
            details['address'] = address
        if bootstrap_servers:
            details['bootstrap_servers'] = bootstrap_servers

        super().__init__(
            message=message,
            error_code=ErrorCode.CONNECTIVITY_ERROR,
            details=details,
            cause=cause
        )


class NotFoundError(KafkaContextError):
    """Exception for missing contexts, current context or brokers."""

    def __init__(self, message: str, name: Optional[str] = None):
        details = {}
        if name:
            details['name'] = name

        super().__init__(
            message=message,
            error_code=ErrorCode.NOT_FOUND,
            details=details
        )


class PersistenceError(KafkaContextError):
    """Exception for configuration store read and write failures."""

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[Exception] = None):
        details = {}
        if path:
            details['path'] = path

        super().__init__(
            message=message,
            error_code=ErrorCode.PERSISTENCE_ERROR,
            details=details,
            cause=cause
        )
