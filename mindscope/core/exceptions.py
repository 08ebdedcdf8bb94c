"""
Custom exceptions
A single hierarchy so callers can catch MindScope errors uniformly
"""

from typing import Any


class MindScopeException(Exception):
    """Base exception for the MindScope engine"""

    def __init__(self, message: str, error_code: str | None = None,
                 details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(MindScopeException):
    """Invalid or missing configuration"""


class ValidationError(MindScopeException):
    """Invalid input"""

    def __init__(self, message: str, field: str | None = None,
                 value: Any | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if field:
            self.details['field'] = field
        if value is not None:
            self.details['value'] = value


class ExternalServiceError(MindScopeException):
    """Failure of an external service (LLM provider)"""

    def __init__(self, message: str, service_name: str = "unknown",
                 status_code: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.details['service_name'] = service_name
        if status_code:
            self.details['status_code'] = status_code


class RoutingError(MindScopeException):
    """Unexpected failure inside the message routing pipeline"""
